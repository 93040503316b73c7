from .ports import ProfileRepository, SampleRepository

__all__ = ["ProfileRepository", "SampleRepository"]
