"""Request-level errors raised by the services and rendered by the app."""


class GlyphicaError(Exception):
    status_code = 400
    message = 'Bad request'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class ValidationError(GlyphicaError):
    status_code = 400
    message = 'Invalid input'


class DuplicateUsername(GlyphicaError):
    status_code = 409
    message = 'This username is already taken'


class InvalidCredentials(GlyphicaError):
    # One message for unknown username and wrong password alike
    status_code = 401
    message = 'Invalid username or password'


class Unauthenticated(GlyphicaError):
    status_code = 401
    message = 'Authentication required'


class NotFound(GlyphicaError):
    status_code = 404
    message = 'Not found'
