"""
Default location of the Hungarian hunspell dictionary.

Place ``index.aff`` and ``index.dic`` (for example the ``hu_HU`` files from
the LibreOffice or Magyarispell dictionaries, renamed) next to this module,
or point LUNR_HU_DICTIONARY_DIR at a directory holding them. No files are
bundled, so without one of the two load() raises ResourceNotFoundError.
"""
