import numpy as np

def lu_decomposition(A, tol=1e-12):
    A = np.asarray(A, dtype=np.float64)
    n = A.shape[0]
    L = np.eye(n)
    U = A.copy()
    P = np.eye(n)
    for i in range(n):
        # Pivot selection
        max_row = np.argmax(np.abs(U[i:, i])) + i
        if abs(U[max_row, i]) < tol:
            raise ValueError("Singular matrix")

        # Swap rows in U
        U[[i, max_row]] = U[[max_row, i]]
        P[[i, max_row]] = P[[max_row, i]]

        # Swap rows in L (only left part)
        if i > 0:
            L[[i, max_row], :i] = L[[max_row, i], :i]

        # Elimination, vectorized over the rows below the pivot
        factors = U[i+1:, i] / U[i, i]
        L[i+1:, i] = factors
        U[i+1:, i:] -= np.outer(factors, U[i, i:])
    return P, L, U

def invert_matrix(A, tol=1e-12):
    P, L, U = lu_decomposition(A, tol=tol)

    # Solve PA = LU → A⁻¹ = U⁻¹ L⁻¹ P
    Y = np.linalg.solve(L, P)
    X = np.linalg.solve(U, Y)

    return X
