from vec.util.errors import VectorError, InvalidArgument, OutOfRange, SizeMismatch
from vec.util.vector import VectorBase, as_integer
