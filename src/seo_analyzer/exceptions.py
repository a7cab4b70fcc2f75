# src/seo_analyzer/exceptions.py


class AnalysisInputError(ValueError):
    """
    Raised when the engine is called with something that is not a valid analysis input,
    e.g. non-string content or a request body missing the 'content' field.

    The HTTP layer maps this to a 400 response.
    """
