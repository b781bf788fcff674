from cloudpaste.dao.memory.paste_memory_dao import PasteMemoryDAO


__all__ = ['PasteMemoryDAO']
