# bootstrap_model.py
import logging
from pathlib import Path
from typing import Optional

import psutil

import config

logger = logging.getLogger(__name__)


def _available_ram_gb() -> float:
    return psutil.virtual_memory().available / (1024 ** 3)


def select_model_filename(ram_gb: Optional[float] = None) -> str:
    """
    Pick the GGUF file to use for the reference assistant.
    - MODEL_FILENAME wins when set.
    - Else the large quantization if enough RAM is free, the small one otherwise.
    """
    if config.MODEL_FILENAME:
        logger.info(f"Using MODEL_FILENAME override: {config.MODEL_FILENAME}")
        return config.MODEL_FILENAME

    ram = _available_ram_gb() if ram_gb is None else ram_gb
    if ram >= config.LARGE_MODEL_MIN_RAM_GB:
        logger.info(f"Detected ~{ram:.1f} GB available, choosing large model")
        return config.MODEL_LARGE
    logger.info(f"Detected ~{ram:.1f} GB available, choosing small model")
    return config.MODEL_SMALL


def ensure_model(models_dir=None, auto_download: Optional[bool] = None) -> str:
    """
    Make sure the selected GGUF file exists locally and return its absolute path.

    Downloads it from the Hugging Face Hub when missing and auto_download
    is on. Raises FileNotFoundError when the model is missing and may not
    be downloaded, RuntimeError when the download fails.
    """
    models_path = Path(models_dir or config.MODELS_DIR)
    auto_download = config.MODEL_AUTO_DOWNLOAD if auto_download is None else auto_download
    models_path.mkdir(parents=True, exist_ok=True)

    repo_id = config.MODEL_REPO
    filename = select_model_filename()
    target = models_path / filename

    if target.exists():
        logger.info(f"Found model: {target.name}")
        return str(target.resolve())

    if not auto_download:
        raise FileNotFoundError(
            f"Model not found at {target}. "
            f"Download it from https://huggingface.co/{repo_id} "
            f"and place it in '{models_path}'."
        )

    try:
        from huggingface_hub import hf_hub_download
    except ImportError:
        raise FileNotFoundError(
            f"Model '{filename}' is missing and huggingface_hub is not installed. "
            f"Run: pip install 'biblia-bot[local-llm]', or place the file in '{models_path}'."
        )

    logger.info(f"First run: downloading '{filename}' from {repo_id}")
    try:
        local = hf_hub_download(
            repo_id=repo_id,
            filename=filename,
            local_dir=str(models_path),
        )
    except Exception as e:
        raise RuntimeError(
            f"Could not download the model '{filename}' from https://huggingface.co/{repo_id}. "
            f"Download it manually into '{models_path}'. Details: {e}"
        ) from e
    logger.info(f"Downloaded: {Path(local).name}")
    return str(Path(local).resolve())
