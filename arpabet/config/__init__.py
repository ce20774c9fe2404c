from arpabet.config.dictionary_config import DictionaryConfig

__all__ = ["DictionaryConfig"]
