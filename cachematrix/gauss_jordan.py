# Pure Python Gauss-Jordan inversion

def identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def invert_matrix(A, tol=1e-12):
    n = len(A)
    I = identity(n)
    M = [[float(x) for x in A[i]] + I[i] for i in range(n)]

    for i in range(n):
        # Pivot selection
        max_row = max(range(i, n), key=lambda r: abs(M[r][i]))
        if abs(M[max_row][i]) < tol:
            raise ZeroDivisionError("Zero pivot encountered")
        M[i], M[max_row] = M[max_row], M[i]

        # Normalize row
        pivot = M[i][i]
        for j in range(2*n):
            M[i][j] /= pivot

        # Eliminate column
        for k in range(n):
            if k != i:
                factor = M[k][i]
                for j in range(2*n):
                    M[k][j] -= factor * M[i][j]

    # Extract inverse
    return [row[n:] for row in M]
