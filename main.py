"""
Firecrawl Discord Bot

Exposes the Firecrawl API to Discord users through slash commands:
1. Scrape a page (/scrape)
2. Map a site's URLs (/map)
3. Extract structured data with a prompt (/extract)

Each user registers their own Firecrawl key with /set-api-key.

Usage:
    python main.py
"""

from firecrawl_bot.main import main

if __name__ == "__main__":
    main()
