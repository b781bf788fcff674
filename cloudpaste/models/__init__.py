from cloudpaste.models.paste_model import PasteModel
from cloudpaste.models.paste_view import PasteView


__all__ = [
    'PasteModel',
    'PasteView',
]
