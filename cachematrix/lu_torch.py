import torch
from typing import Optional, Tuple

class LUPyTorch:
    """
    Matrix inversion using PyTorch's GPU-accelerated operations.
    """
    
    def __init__(self, device: str = 'cuda'):
        """
        Args:
            device: 'cuda' for GPU, 'cpu' for CPU
        """
        self.device = torch.device(device if torch.cuda.is_available() else 'cpu')
        if device == 'cuda' and not torch.cuda.is_available():
            print("WARNING: CUDA not available, falling back to CPU")
    
    def lu_decomposition(self, A: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """
        Compute LU decomposition with partial pivoting: A = PLU
        
        Uses torch.linalg.lu_factor which calls cuSOLVER under the hood.
        
        Args:
            A: Input matrix [n, n]
            
        Returns:
            P: Permutation matrix [n, n]
            L: Lower triangular with ones on diagonal [n, n]
            U: Upper triangular [n, n]
        """
        A = A.to(self.device)
        if not A.is_floating_point():
            A = A.to(torch.float64)
        
        # Compact LU representation + LAPACK-style pivots
        LU, pivots = torch.linalg.lu_factor(A)
        P, L, U = torch.lu_unpack(LU, pivots)
        return P, L, U
    
    def invert_triangular(self, T: torch.Tensor, lower: bool = True) -> torch.Tensor:
        """
        Invert triangular matrix using PyTorch's optimized routine.
        
        Args:
            T: Triangular matrix [n, n]
            lower: True for lower triangular, False for upper
            
        Returns:
            T_inv: Inverse of T [n, n]
        """
        # solve_triangular calls cuBLAS trsm on GPU
        n = T.shape[0]
        I = torch.eye(n, dtype=T.dtype, device=T.device)
        
        T_inv = torch.linalg.solve_triangular(T, I, upper=not lower)
        return T_inv
    
    def invert_via_lu(self, A: torch.Tensor, tol: float = 1e-12) -> torch.Tensor:
        """
        Invert matrix using LU decomposition: A^(-1) = U^(-1) @ L^(-1) @ P^T
        
        Raises:
            ValueError: if U has a pivot smaller than ``tol`` (singular matrix)
        """
        P, L, U = self.lu_decomposition(A)
        if bool((U.diagonal().abs() < tol).any()):
            raise ValueError("Singular matrix")
        
        L_inv = self.invert_triangular(L, lower=True)
        U_inv = self.invert_triangular(U, lower=False)
        
        return U_inv @ L_inv @ P.T


def invert_matrix(A: torch.Tensor, device: Optional[str] = None, tol: float = 1e-12) -> torch.Tensor:
    # Stay on the tensor's own device unless told otherwise
    lu = LUPyTorch(device=device or A.device.type)
    return lu.invert_via_lu(A, tol=tol)
