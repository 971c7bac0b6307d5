"""
Pipeline Module - Remote Access and Text Handling

Item gateway over the Hacker News API and HTML text conversion.
"""

from hackernews_mcp.pipeline.fetcher import ItemGateway, LISTINGS
from hackernews_mcp.pipeline.parser import TextParser, ParsedText

__all__ = [
    "ItemGateway",
    "LISTINGS",
    "TextParser",
    "ParsedText",
]
