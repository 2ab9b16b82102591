"""campusfood project package (settings, urls, wsgi)."""
