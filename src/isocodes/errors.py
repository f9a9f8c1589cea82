# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = (
    'Error',
    'InvalidStringCodeError',
    'MarshalError',
    'UnmarshalError',
)

class Error(ValueError):
    '''Base class of all isocodes errors.'''

    default_message = None

    def __init__(self, message=None, *, code=None):
        if message is None:
            message = self.default_message
            if code is not None:
                message = f'{message}: {code!r}'
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self):
        return self.message or ''

class InvalidStringCodeError(Error):
    # string representation could not be converted to a code
    default_message = 'invalid string representation of the code'

class MarshalError(Error):
    default_message = 'failed to marshal json'

class UnmarshalError(Error):
    default_message = 'failed to unmarshal json'

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
