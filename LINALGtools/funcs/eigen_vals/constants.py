##############################################################################
# Global constants
##############################################################################

JOB_COMPUTE = "V"        # routine job flag: compute eigenvectors
JOB_SKIP = "N"           # routine job flag: do not compute eigenvectors
WORKSPACE_QUERY = -1     # lwork sentinel: only report the optimal workspace size

# Fallback workspace size per matrix order when the query fails
WORKSPACE_FACTOR_VECTORS = 4
WORKSPACE_FACTOR_VALUES = 3

# Largest |imaginary part| accepted silently when truncating to real eigenvalues
COMPLEX_TOLERANCE = 1e-10
COMPLEX_POLICIES = ("warn", "raise", "ignore")

##############################################################################
# Driver states
##############################################################################

CONSTRUCTED = "constructed"
READY = "ready"
COMPLETE = "complete"
FAILED = "failed"
