from .owner import OwnerModel
from .viewer import ViewerModel
from .class_session import ClassSessionModel
from .exam import ExamModel
from .note import NoteModel

__all__ = [
    "OwnerModel",
    "ViewerModel",
    "ClassSessionModel",
    "ExamModel",
    "NoteModel",
]
