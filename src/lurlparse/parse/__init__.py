__version__ = "0.1"

from .parse import InvalidEncodingError, ParseErrorCode, ParsedURL, URLParseError, is_scheme_valid, parse_url, url_decode
