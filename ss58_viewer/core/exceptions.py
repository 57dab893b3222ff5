class Ss58ViewerError(Exception):
    """Base exception for all ss58_viewer errors"""
    pass


class ConfigError(Ss58ViewerError):
    """Invalid or inconsistent global.json"""
    pass


class RegistryLoadError(Ss58ViewerError):
    """Registry file is missing, unreadable or not shaped like the SS58 registry"""
    pass


class RegistryEntryError(RegistryLoadError):
    """
    A single registry entry doesn't match what RegistryEntry expects
    missing keys, wrong types, negative prefix, etc
    """
    pass
