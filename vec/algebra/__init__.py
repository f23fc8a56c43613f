from vec.algebra.tvector import TVector, MAX_VECTOR_SIZE
