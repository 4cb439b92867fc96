from importlib import resources

from .backend import Decoration, fragment_decoration

BADGE_DESIGN_SIZE = 512


def load_badge() -> str:
    with resources.files(__package__).joinpath("data/badge.svg").open("r", encoding="utf-8") as fh:
        return fh.read()


def badge_decoration() -> Decoration:
    """Round emblem centered on the symbol, scaled to the document size."""
    return fragment_decoration(load_badge(), design_size=BADGE_DESIGN_SIZE)
