"""
Storage layer: byte cursor, file header, pages and the page-chain walk.

Submodules are imported explicitly (``rekordpdb.storage.header`` and so
on) because row decoders depend on ``rekordpdb.storage.binary``.
"""
