"""
Crawl Starter - crawler templates on top of Crawlee.

This package provides:
- Tiered proxy loading from flat files
- HTTP, BeautifulSoup and headless Firefox crawler templates
- Resource blocking for browser navigation
"""

__version__ = "1.0.0"
__author__ = "Crawl_Starter"
