from vec.util import VectorError, InvalidArgument, OutOfRange, SizeMismatch, VectorBase
from vec.algebra import TVector, MAX_VECTOR_SIZE
