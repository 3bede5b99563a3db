from .observable import StateSubject
from .photos import PhotoEncodingError, encode_photo
from .seed import SEED_ITEMS, create_seed_items
from .state_manager import HuntStateManager

__all__ = [
    'HuntStateManager',
    'PhotoEncodingError',
    'SEED_ITEMS',
    'StateSubject',
    'create_seed_items',
    'encode_photo'
]
