class Player:
    def __init__(self, index, name):
        self.index = index  # position in turn order
        self.name = name

    def __repr__(self):
        return f"Player({self.index}, {self.name!r})"
