import logging
import random

logger = logging.getLogger(__name__)

FINISHED = "Game Finished!"


def load_prompts(path):
    # one prompt per line; blank lines and "#" comments are skipped
    with open(path, "r", encoding="utf-8") as f:
        prompts = [line.strip() for line in f if line.strip() and not line.lstrip().startswith("#")]
    logger.info("Loaded %d prompts from %s", len(prompts), path)
    return prompts


class PromptPool:
    """
    Serves prompts from a fixed catalog in random order without repeats.

    Unused catalog positions are kept in a list and sampled with a
    swap-remove, so each draw is O(1) regardless of how many prompts have
    already been shown. Once every prompt has been served, draw() returns
    FINISHED and leaves the pool untouched.
    """

    def __init__(self, prompts, rng=None):
        # duplicates collapse so consumed stays a subset of distinct prompts
        self.prompts = tuple(dict.fromkeys(prompts))
        self.used = set()
        self._unused = list(range(len(self.prompts)))
        self._rng = rng or random

    def __len__(self):
        return len(self.prompts)

    @property
    def remaining(self):
        return len(self._unused)

    @property
    def is_exhausted(self):
        return not self._unused

    def draw(self):
        if not self._unused:
            return FINISHED

        pos = self._rng.randrange(len(self._unused))
        self._unused[pos], self._unused[-1] = self._unused[-1], self._unused[pos]
        prompt = self.prompts[self._unused.pop()]
        self.used.add(prompt)

        if not self._unused:
            logger.info("Prompt pool exhausted after %d prompts", len(self.prompts))
        return prompt
