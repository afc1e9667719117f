from .page import Page, PageHeader, PageContent, DataContent, OtherContent
from .row_group import RowGroup
from .slots.bitmap_slot import PresenceBitmap

__all__ = ["Page", "PageHeader", "PageContent", "DataContent",
           "OtherContent", "RowGroup", "PresenceBitmap"]
