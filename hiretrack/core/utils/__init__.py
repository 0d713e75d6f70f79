def nested_getattr(obj, attr, default=None, separator='.'):
    """
    Get nested attribute, returning default when any link is missing.

    nested_getattr(interview, 'application.company_id')
    """
    for name in attr.split(separator):
        obj = getattr(obj, name, None)
        if obj is None:
            return default
    return obj
