from models.course import CourseRecord, is_prerequisite_of
from models.catalog import CourseCatalog, CatalogReport

__all__ = [
    "CourseRecord",
    "is_prerequisite_of",
    "CourseCatalog",
    "CatalogReport",
]
