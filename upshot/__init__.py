from upshot.errors import UnwrapError
from upshot.option import Nothing, Option, Some
from upshot.result import Err, Ok, Result

__all__ = [
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
]
