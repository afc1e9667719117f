from .page_source import PageSource, PageSourceStats

__all__ = ["PageSource", "PageSourceStats"]
