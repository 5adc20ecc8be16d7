"""
GPU backend using PyTorch.

Runs the reduction pass on torch tensors (CUDA, Apple MPS, or CPU).
"""

import numpy as np
import warnings
from typing import Any, List, Optional

from .base import GPUBackend


class PyTorchBackend(GPUBackend):
    """
    PyTorch backend.

    Same pivoting and column-skip rules as the CPU reference, with the
    elimination step applied to all rows at once. Converts at entry
    (numpy -> torch) and writes the reduced rows back into the caller's
    array at exit, so the in-place contract holds.

    FP64 by default; Apple MPS only supports FP32.
    """

    def __init__(self, device: Optional[str] = None, use_fp64: Optional[bool] = None):
        """Initialize PyTorch backend."""
        try:
            import torch
            self.torch = torch
        except ImportError:
            raise ImportError(
                "PyTorch required for GPU backend. "
                "Install: pip install torch"
            )

        self.device = self._select_device(device)

        if self.device.type == 'mps':
            if use_fp64:
                raise RuntimeError(
                    "FP64 not supported on Apple Metal. "
                    "Use use_fp64=False or the CPU backend."
                )
            use_fp64 = False
        elif use_fp64 is None:
            use_fp64 = True

        if not use_fp64:
            warnings.warn(
                "Running elimination in FP32; pivot tolerance is "
                "close to single precision rounding error.",
                UserWarning
            )

        self.dtype = torch.float64 if use_fp64 else torch.float32
        self.precision = "fp64" if use_fp64 else "fp32"
        self.name = f"pytorch_{self.precision}"

    def _select_device(self, requested: Optional[str]) -> Any:
        """Pick the requested device, else CUDA, else MPS, else CPU."""
        torch = self.torch

        if requested:
            return torch.device(requested)

        if torch.cuda.is_available():
            return torch.device('cuda')
        if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
            return torch.device('mps')

        warnings.warn("No GPU available, using CPU")
        return torch.device('cpu')

    def reduce(
        self,
        augmented: np.ndarray,
        m: int,
        n: int,
        tol: float,
    ) -> List[int]:
        """
        Gauss-Jordan reduction on the device.

        ALL row operations happen on torch tensors.
        Only convert at boundaries (entry/exit).
        """
        torch = self.torch

        A = torch.as_tensor(
            np.ascontiguousarray(augmented[:m]), dtype=self.dtype
        ).to(self.device)

        row = 0
        pivot_cols = []

        for col in range(n):
            if row >= m:
                break

            # Partial pivoting; argmax returns the first maximal row
            magnitudes = A[row:m, col].abs()
            offset = int(torch.argmax(magnitudes).item())
            if magnitudes[offset].item() < tol:
                continue

            p_row = row + offset
            if p_row != row:
                A[[row, p_row]] = A[[p_row, row]]

            pivot = A[row, col].item()
            if abs(pivot) < tol:
                continue
            A[row] = A[row] / pivot

            # Eliminate from every other row in one rank-1 update
            factors = A[:, col].clone()
            factors[row] = 0.0
            factors[factors.abs() < tol] = 0.0
            A -= factors.unsqueeze(1) * A[row].unsqueeze(0)

            pivot_cols.append(col)
            row += 1

        augmented[:m] = A.cpu().numpy()
        return pivot_cols

    def get_device_info(self) -> dict:
        """Get backend information."""
        return {
            'backend': 'gpu' if self.device.type != 'cpu' else 'cpu',
            'precision': self.precision,
            'device': str(self.device),
            'library': f'PyTorch {self.torch.__version__}',
        }
