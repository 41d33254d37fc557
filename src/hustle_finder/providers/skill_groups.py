"""Skill trigger groups shared by the course and creator platform catalogs."""

TECH = ("programming", "web development", "mobile development", "data science", "ai", "python", "javascript", "design")
BUSINESS = ("marketing", "sales", "entrepreneurship", "finance", "management", "consulting", "leadership")
CREATIVE = ("writing", "design", "photography", "video editing", "music", "illustration", "art")
WELLNESS = ("fitness", "nutrition", "yoga", "meditation", "coaching", "wellness")
CONTENT = ("writing", "content creation", "podcasting", "video production")
