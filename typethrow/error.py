
def ensure_callable(fn):
    if not callable(fn):
        raise TypeError({
            'info': "Should be callable",
            'value': fn,
            'type': type(fn)
        })
    return fn


def ensure_has_type(expected_types, v):
    if not isinstance(v, expected_types):
        raise TypeError({
            'info': "Value has unexpected type",
            'value': v,
            'actual': type(v),
            'expected': expected_types
        })
    return v


class Error(Exception):
    def __init__(self, name, info, **kwargs):
        super().__init__({'name': name, 'info': info, **kwargs})

    @property
    def name(self):
        return self.args[0]['name']

    @property
    def info(self):
        return self.args[0]['info']


class RecordError(Error):
    pass


class MissingFieldError(Error):
    def __init__(self, name, info='missing', **kwargs):
        super().__init__(name, info, **kwargs)


class InvalidFieldError(Error):
    pass


class MissingContextError(Error):
    '''Diagnostic context passed to the formatter is absent or malformed'''


class AccessError(Exception):
    pass


class InvalidTypeReferenceError(TypeError):
    '''Type reference is neither a type name nor a class'''


class TypeMismatchError(TypeError):
    '''Checked value doesn't match any of the expected types

    The message is the formatter output, `context` is the diagnostic context it
    was rendered from.

    '''

    def __init__(self, message, context=None):
        super().__init__(message)
        self.context = context
