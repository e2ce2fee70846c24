from tests.fixtures.doubles import FakeDictionaryService, StaticResolver

__all__ = ["FakeDictionaryService", "StaticResolver"]
