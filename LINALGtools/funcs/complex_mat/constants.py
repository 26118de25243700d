from numba import types

##############################################################################
# Global constants
##############################################################################

RE, IM = 0, 1  # indexes into (re, im) pairs

##############################################################################
# Type signatures for Numba functions
##############################################################################

# Signature for scalar * matrix
scalar_times_matrix_sig_64 = types.void(
    types.float64,                # z_re
    types.float64,                # z_im
    types.float64[:,:],           # a_re: (nr, nc)
    types.float64[:,:],           # a_im: (nr, nc)
    types.float64[:,:],           # out_re: (nr, nc)
    types.float64[:,:],           # out_im: (nr, nc)
)

# Signature for matrix * matrix
matrix_times_matrix_sig_64 = types.void(
    types.float64[:,:],           # a_re: (nr, nk)
    types.float64[:,:],           # a_im: (nr, nk)
    types.float64[:,:],           # b_re: (nk, nc)
    types.float64[:,:],           # b_im: (nk, nc)
    types.float64[:,:],           # out_re: (nr, nc), zero initialised
    types.float64[:,:],           # out_im: (nr, nc), zero initialised
)

# Signature for the Hermitian products A^H A and A A^H
hermitian_sig_64 = types.void(
    types.float64[:,:],           # a_re: (nr, nc)
    types.float64[:,:],           # a_im: (nr, nc)
    types.float64[:,:],           # out_re: square, zero initialised
    types.float64[:,:],           # out_im: square, zero initialised
)

# Signature for scalar * diagonal and diagonal * diagonal
scalar_times_diagonal_sig_64 = types.void(
    types.float64,                # z_re
    types.float64,                # z_im
    types.float64[:],             # d_re: (order,)
    types.float64[:],             # d_im: (order,)
    types.float64[:],             # out_re: (order,)
    types.float64[:],             # out_im: (order,)
)
diagonal_times_diagonal_sig_64 = types.void(
    types.float64[:],             # d1_re: (order,)
    types.float64[:],             # d1_im: (order,)
    types.float64[:],             # d2_re: (order,)
    types.float64[:],             # d2_im: (order,)
    types.float64[:],             # out_re: (order,)
    types.float64[:],             # out_im: (order,)
)

# Signature for diagonal * matrix and matrix * diagonal
diagonal_matrix_sig_64 = types.void(
    types.float64[:],             # d_re: (order,)
    types.float64[:],             # d_im: (order,)
    types.float64[:,:],           # a_re: (nr, nc)
    types.float64[:,:],           # a_im: (nr, nc)
    types.float64[:,:],           # out_re: (nr, nc)
    types.float64[:,:],           # out_im: (nr, nc)
)
