class MixedProductError(RuntimeError):
    """
    Base class for errors raised by mixedproduct.
    """
    pass


class SpentError(MixedProductError):
    """
    Raised when an exhausted product is stepped, read or iterated again.
    Sizes and periods are discovered during the single pass, so a spent
    product cannot be restarted.
    """
    def __init__(self, message='mixed product has already been consumed'):
        super(SpentError, self).__init__(message)


class PeriodAlreadyFixedError(MixedProductError):
    """
    Raised when a level's padded period is resolved a second time.
    """
    def __init__(self, index, period):
        self.index = index
        self.period = period
        super(PeriodAlreadyFixedError, self).__init__(
            'level {index} already has padded period {period}'.format(
                index=index, period=period))


class ConfigError(MixedProductError):
    """
    Invalid command line or YAML configuration.
    """
    pass
