"""
Interior Studio - Errors
Failures that can occur during a submission. Each carries an I18n key
so the submission boundary can show a localized message.
"""


class StudioError(Exception):
    """Base class for submission failures."""

    message_key = 'error_unknown'

    def __init__(self, detail: str = "", message_key: str = None):
        super().__init__(detail or self.__class__.__name__)
        self.detail = detail
        if message_key:
            self.message_key = message_key


class MissingInputError(StudioError):
    """No base image was provided."""
    message_key = 'error_base_image_missing'


class ConfigurationError(StudioError):
    """The API credential is not available."""
    message_key = 'error_api_key_missing'


class ImageReadError(StudioError):
    """An attached image file could not be read."""
    message_key = 'error_image_read'


class RemoteCallError(StudioError):
    """The model request failed."""
    message_key = 'error_remote'


class PartialResponseError(StudioError):
    """The model replied without an image."""
    message_key = 'error_model_no_image'


class MalformedMetadataError(StudioError):
    """A fenced JSON block was present but could not be parsed."""
    message_key = 'error_malformed_metadata'
