"""
Operator verification entry point.

Builds a grid from the Hydra config, checks the discrete operator identities
(curl adjointness, sine-transform and Laplacian-inverse round trips,
projection) on random fields and optionally logs the results to MLflow.

Usage:
    uv run python main.py
    uv run python main.py params.nx=128 params.ny=96
    uv run python main.py -m params.nx=32,64,128 mlflow.enabled=true
"""

import logging
import os
import sys
from pathlib import Path

import hydra
import mlflow
from dotenv import load_dotenv
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

load_dotenv()
sys.path.insert(0, str(Path(__file__).parent / "src"))

from macgrid.verification import run_verification  # noqa: E402

log = logging.getLogger(__name__)


def setup_mlflow(cfg: DictConfig) -> str:
    """Setup MLflow tracking and return experiment name."""
    tracking_uri = cfg.mlflow.get("tracking_uri", "./mlruns")
    os.environ["MLFLOW_TRACKING_URI"] = str(tracking_uri)
    mlflow.set_tracking_uri(tracking_uri)

    experiment_name = cfg.experiment_name
    prefix = cfg.mlflow.get("project_prefix", "")
    if prefix and not experiment_name.startswith("/"):
        experiment_name = f"{prefix}/{experiment_name}"
    mlflow.set_experiment(experiment_name)
    return experiment_name


@hydra.main(config_path="conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> float:
    """Main entry point.

    Returns
    -------
    float
        Largest identity defect, usable as a sweep objective.
    """
    params = instantiate(cfg.params, _convert_="partial")
    log.info(f"Grid: nx={params.nx}, ny={params.ny}, length={params.length}")

    if cfg.mlflow.get("enabled", False):
        log.info(f"MLflow experiment: {setup_mlflow(cfg)}")
        with mlflow.start_run(run_name=f"N{params.nx}x{params.ny}"):
            mlflow.log_params(params.to_mlflow())
            mlflow.log_dict(OmegaConf.to_container(cfg), "config.yaml")
            metrics = run_verification(params)
            mlflow.log_metrics(metrics.to_mlflow())
    else:
        metrics = run_verification(params)

    log.info(
        f"Done: passed={metrics.passed}, time={metrics.wall_time_seconds:.3f}s"
    )
    defects = [
        v for k, v in metrics.to_mlflow().items() if k not in ("wall_time_seconds", "passed")
    ]
    return max(defects)


if __name__ == "__main__":
    main()
