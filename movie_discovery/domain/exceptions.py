class DomainError(Exception):
    pass


class CatalogUnavailableError(DomainError):
    pass


class TrendStoreError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
