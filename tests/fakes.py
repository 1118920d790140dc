# tests/fakes.py
# Scripted shuffle sources so dealt layouts can be asserted exactly.

class NoShuffle:
    """Leaves every list in its original order; counts calls."""
    def __init__(self):
        self.calls = 0

    def shuffle(self, items):
        self.calls += 1


class Reverse:
    def __init__(self):
        self.calls = 0

    def shuffle(self, items):
        self.calls += 1
        items.reverse()


class EmptyLookingShuffle(NoShuffle):
    """A valid source that happens to be falsy."""
    def __len__(self):
        return 0
