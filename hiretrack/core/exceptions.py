class TenantMismatchError(Exception):
    """
    Raised when records belonging to different companies meet in one write.

    This is not a ``ValidationError`` subclass, so ``except ValidationError``
    blocks will not swallow it. Like ``ValidationError`` it exposes
    ``message_dict`` keyed by the offending field.
    """

    def __init__(self, error_dict):
        self.error_dict = {
            field: messages if isinstance(messages, list) else [messages]
            for field, messages in error_dict.items()
        }
        super().__init__(self.error_dict)

    @property
    def message_dict(self):
        return self.error_dict

    @property
    def fields(self):
        return sorted(self.error_dict)
