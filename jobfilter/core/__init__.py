"""Core framework components."""

from .protocols import Item, ItemGroup, Job, NamedItem, Run, TopLevelItem

__all__ = ["Item", "ItemGroup", "Job", "NamedItem", "Run", "TopLevelItem"]
