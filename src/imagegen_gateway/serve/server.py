"""Helper to launch the gateway under uvicorn from Python."""
from __future__ import annotations
import os
import subprocess
import sys

def main() -> None:
    host = os.getenv("IMAGEGEN_HOST", "0.0.0.0")
    port = os.getenv("IMAGEGEN_PORT", "8000")
    workers = os.getenv("IMAGEGEN_WORKERS", "1")

    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "imagegen_gateway.serve.fastapi_app:app",
        "--host", host,
        "--port", str(port),
        "--workers", str(workers),
    ]
    subprocess.run(cmd, check=True)

if __name__ == "__main__":
    main()
