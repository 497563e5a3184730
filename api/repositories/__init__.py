"""
Persistence adapters.

Today every collection is a JSON array on disk; services only see
CollectionStore.load/save, so a database can replace it later.
"""
