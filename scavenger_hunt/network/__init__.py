from .client import SubmissionClient

__all__ = [
    'SubmissionClient'
]
