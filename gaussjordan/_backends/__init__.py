"""
Backend selection and management.

Provides a unified interface for the NumPy reference backend (CPU) and
the optional PyTorch backend (CUDA, Apple MPS).
"""

from typing import Optional, Union
import warnings

from .base import (
    BackendBase,
    SolutionType,
    SolveResult,
    Unique,
    Infinite,
    Inconsistent,
    SquareSolveResult,
)
from .conditioning import check_conditioning, format_conditioning_message

# Try importing CPU backend (always available)
try:
    from .cpu_fp64_backend import CPUBackendFP64
    CPU_AVAILABLE = True
except ImportError:
    CPU_AVAILABLE = False
    warnings.warn("CPU backend unavailable - installation error!")

# PyTorch is optional
try:
    import torch  # noqa: F401
    from .gpu_backend import PyTorchBackend
    PYTORCH_AVAILABLE = True
except ImportError:
    PYTORCH_AVAILABLE = False


def _has_gpu() -> bool:
    if not PYTORCH_AVAILABLE:
        return False
    import torch
    if torch.cuda.is_available():
        return True
    return hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()


def get_backend(
    backend: Union[str, BackendBase] = 'cpu',
    use_fp64: Optional[bool] = None,
    device: Optional[str] = None,
) -> BackendBase:
    """
    Get computational backend.

    Parameters
    ----------
    backend : str or BackendBase
        Backend selection:
        - 'cpu': NumPy reference implementation (FP64)
        - 'pytorch': PyTorch on the best available device (or ``device``)
        - 'gpu': PyTorch, but fail if no GPU is present
        A backend instance is returned unchanged.

    use_fp64 : bool or None
        Precision for the PyTorch backend (None: FP64 unless on MPS)

    device : str, optional
        Torch device string, e.g. 'cuda:1'

    Returns
    -------
    BackendBase
        Backend instance

    Examples
    --------
    >>> backend = get_backend('cpu')
    >>> backend = get_backend('pytorch', device='cpu')
    """
    if isinstance(backend, BackendBase):
        return backend

    if backend == 'cpu':
        if not CPU_AVAILABLE:
            raise RuntimeError("CPU backend unavailable!")
        return CPUBackendFP64()

    elif backend == 'pytorch':
        if not PYTORCH_AVAILABLE:
            raise RuntimeError(
                "PyTorch backend unavailable.\n"
                "Install: pip install torch"
            )
        return PyTorchBackend(device=device, use_fp64=use_fp64)

    elif backend == 'gpu':
        if not _has_gpu():
            raise ValueError(
                "No GPU detected.\n"
                "Options:\n"
                "  - Use backend='cpu'\n"
                "  - Install PyTorch with CUDA for NVIDIA\n"
                "  - Install PyTorch with MPS for Apple Silicon"
            )
        return PyTorchBackend(device=device, use_fp64=use_fp64)

    else:
        raise ValueError(
            f"Unknown backend: '{backend}'\n"
            f"Valid options: 'cpu', 'pytorch', 'gpu'"
        )


def list_available_backends() -> list:
    """List names of available backends."""
    backends = []
    if CPU_AVAILABLE:
        backends.append('cpu')
    if PYTORCH_AVAILABLE:
        backends.append('pytorch')
    if _has_gpu():
        backends.append('gpu')
    return backends


def print_backend_info():
    """Print detailed backend information (diagnostic)."""
    print("GaussJordan Backend Status")
    print("=" * 50)
    print(f"\nAvailable Backends:")
    print(f"  CPU (FP64):      {'✓' if CPU_AVAILABLE else '✗'} - NumPy row operations (reference)")
    print(f"  PyTorch:         {'✓' if PYTORCH_AVAILABLE else '✗'} - vectorised elimination")
    print(f"  GPU device:      {'✓' if _has_gpu() else '✗'}")

    print(f"\nDefault Backend:")
    try:
        backend = get_backend('cpu')
        info = backend.get_device_info()
        print(f"  {backend.name} ({info['library']})")
    except Exception as e:
        print(f"  Error: {e}")


# Export main interface
__all__ = [
    'get_backend',
    'list_available_backends',
    'print_backend_info',
    'BackendBase',
    'SolutionType',
    'SolveResult',
    'Unique',
    'Infinite',
    'Inconsistent',
    'SquareSolveResult',
    'check_conditioning',
    'format_conditioning_message',
    'CPU_AVAILABLE',
    'PYTORCH_AVAILABLE',
]


if __name__ == "__main__":
    print_backend_info()
