"""
Conditioning diagnostics for the coefficient block.

Gauss-Jordan decides rank with an absolute pivot tolerance. An SVD of the
coefficients tells the caller how far that decision can be trusted.
"""

import numpy as np
from scipy.linalg import svdvals
from typing import Dict, List, Optional

# Condition numbers above this lose most of double precision
ILL_CONDITIONED = 1e10

# Row norm ratios above this defeat partial pivoting
POOR_SCALING = 1e8


def check_conditioning(
    coefficients: np.ndarray,
    tol: Optional[float] = None,
) -> Dict:
    """
    Estimate condition number and numerical rank of a coefficient block.

    Parameters
    ----------
    coefficients : ndarray, shape (m, n)
        Coefficient block of the augmented matrix (no right-hand side)
    tol : float, optional
        Singular value cutoff for the numerical rank. Defaults to
        ``max(m, n) * eps * sigma_max``.

    Returns
    -------
    dict with keys:
        - condition_number: float - sigma_max / sigma_min (inf if singular)
        - numerical_rank: int
        - scale_ratio: float - largest / smallest nonzero row norm
        - well_conditioned: bool
        - warnings: list[str]
    """
    A = np.asarray(coefficients, dtype=np.float64)
    m, n = A.shape

    if A.size == 0:
        return {
            'condition_number': np.inf,
            'numerical_rank': 0,
            'scale_ratio': 1.0,
            'well_conditioned': True,
            'warnings': [],
        }

    try:
        sigma = svdvals(A)
    except np.linalg.LinAlgError:
        return {
            'condition_number': np.inf,
            'numerical_rank': 0,
            'scale_ratio': 1.0,
            'well_conditioned': False,
            'warnings': ["SVD did not converge"],
        }

    sigma_max = sigma.max() if len(sigma) else 0.0
    if tol is None:
        tol = max(m, n) * np.finfo(np.float64).eps * sigma_max

    numerical_rank = int(np.sum(sigma > tol))

    row_norms = np.linalg.norm(A, axis=1)
    row_norms = row_norms[row_norms > 0]  # Exclude zero rows
    scale_ratio = row_norms.max() / row_norms.min() if len(row_norms) else 1.0

    # Only full-rank blocks have a meaningful condition number
    full_rank = numerical_rank == min(m, n) and sigma_max > 0
    cond = sigma_max / sigma.min() if full_rank else np.inf

    warning_messages: List[str] = []

    if full_rank and cond > ILL_CONDITIONED:
        warning_messages.append(
            f"Coefficient matrix is ill-conditioned (κ = {cond:.2e}); "
            f"rank and solution may be unreliable."
        )

    if scale_ratio > POOR_SCALING:
        warning_messages.append(
            f"Equations differ in scale by {scale_ratio:.2e}; "
            f"consider rescaling rows before solving."
        )

    return {
        'condition_number': cond,
        'numerical_rank': numerical_rank,
        'scale_ratio': scale_ratio,
        'well_conditioned': len(warning_messages) == 0,
        'warnings': warning_messages,
    }


def format_conditioning_message(report: Dict) -> str:
    """Format a conditioning report for display."""
    lines = [
        f"Condition number: {report['condition_number']:.3e}",
        f"Numerical rank (SVD): {report['numerical_rank']}",
    ]
    if report['well_conditioned']:
        lines.append("✓ Well-conditioned")
    else:
        lines.extend(f"⚠️  {w}" for w in report['warnings'])
    return "\n".join(lines)
