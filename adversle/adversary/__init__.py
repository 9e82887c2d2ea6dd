from .selector import Selection, least_informative, pick, reselect

__all__ = ["Selection", "least_informative", "pick", "reselect"]
