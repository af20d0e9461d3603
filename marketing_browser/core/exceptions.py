class MarketingBrowserError(Exception):
    """Base exception for all marketing_browser errors"""
    pass

class ConfigError(MarketingBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class DatasetSchemaError(MarketingBrowserError):
    """
    Records file doesn't have the shape the loader expects
    (top-level value is not a list, entries are not objects, etc)
    """
    pass
