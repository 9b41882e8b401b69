"""
Server-rendered category listing page (hero, article cards, sidebar).
"""
