"""Discord bot for the Firecrawl scrape, map and extract APIs."""

__version__ = "0.1.0"
