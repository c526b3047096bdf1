"""Mass actions – results returned to the client."""
from vidi_frontend.mass_action.result import GenericResultAction, ResultAction

__all__ = ["GenericResultAction", "ResultAction"]
