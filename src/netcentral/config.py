from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Eigenvector power iteration
    eigen_tol: float = float(os.getenv("NETCENTRAL_EIGEN_TOL", "1e-6"))
    eigen_max_iter: int = int(os.getenv("NETCENTRAL_EIGEN_MAX_ITER", "1000"))

    # Column names used when reading node/edge records.
    node_key: str = os.getenv("NETCENTRAL_NODE_KEY", "id")
    source_key: str = os.getenv("NETCENTRAL_SOURCE_KEY", "source")
    target_key: str = os.getenv("NETCENTRAL_TARGET_KEY", "target")
    weight_key: str = os.getenv("NETCENTRAL_WEIGHT_KEY", "weight")
