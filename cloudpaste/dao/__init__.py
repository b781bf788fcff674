from cloudpaste.dao.base import PasteBaseDAO
from cloudpaste.dao.memory import PasteMemoryDAO
from cloudpaste.dao.redis import PasteRedisDAO


__all__ = [
    'PasteBaseDAO',
    'PasteMemoryDAO',
    'PasteRedisDAO',
]
