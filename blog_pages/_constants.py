"""Common literal values used across blog_pages.

These constants keep class names, labels, and fallbacks centralized so the
renderers, the HTML surface, and tests can import the same values without
drifting. Intended for internal use within the blog_pages package.

Examples
--------
>>> from blog_pages import _constants
>>> _constants.READING_TIME_TEMPLATE.format(minutes=4)
'4 min read'
>>> _constants.PLACEHOLDER_HREF
'#'
"""

PLACEHOLDER_HREF = "#"
READ_MORE_LABEL = "Read More"
READING_TIME_TEMPLATE = "{minutes} min read"
COPYRIGHT_TEMPLATE = "Copyright {year}"
LOCALE_DATE_FORMAT = "%x"
ROOT_ID = "app"
USER_AGENT = "blog-pages/0.1"
