# Error taxonomy shared by the store, embedding, search and generate layers.


class RecommenderError(Exception):
    """Base class for all course_recommender errors."""


class InputError(RecommenderError):
    """A required request field is missing or empty."""


class ProviderUnavailable(RecommenderError):
    """An embedding, model or store provider failed or could not be reached."""


class StoreUnavailable(ProviderUnavailable):
    """The profile store could not list its candidates."""


class MalformedVectorError(RecommenderError, ValueError):
    """An embedding contained something other than real numbers."""
