"""Write a shell script that executes votes for many escrow owners at once."""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional, Union

from .data import EpochData
from .pubkey import Pubkey

MAX_PARALLEL_JOBS = 5


def render_parallel_sh(data_file: str, weights_file: str, escrow_owners: Iterable[Pubkey]) -> str:
    """The script text for the given data and weights files and owners."""
    lines = [
        "#!/bin/bash",
        "",
        "# Define the list of escrow owners",
        "",
        "accounts=(",
        *(f'"{owner}"' for owner in escrow_owners),
        ")",
        "",
        f"max_parallel_jobs={MAX_PARALLEL_JOBS}",
        "current_jobs=0",
        "",
        "start_time=$(date +%s)",
        "# Execute the command for each account in parallel",
        'for account in "${accounts[@]}"',
        "do",
        '    echo "Processing account: $account"',
        f"    ./target/release/vote-market-manager execute-votes {data_file} {weights_file}"
        ' -k ~/.config/solana/script-authority.json -e "$account" &',
        "    current_jobs=$((current_jobs + 1))",
        "",
        "    # If the number of current jobs equals the maximum allowed, wait for them to finish",
        '    if [ "$current_jobs" -ge "$max_parallel_jobs" ]; then',
        "        wait -n",
        "        # Decrease the count of current jobs after one completes",
        "        current_jobs=$((current_jobs - 1))",
        "    fi",
        "done",
        "",
        "# Wait for all background processes to finish",
        "wait",
        "",
        "end_time=$(date +%s)",
        "",
        "elapsed_time=$((end_time - start_time))",
        "",
        'echo "All processes completed in $elapsed_time seconds."',
    ]
    return "\n".join(lines) + "\n"


def create_parallel_sh(
    data_file: str,
    weights_file: str,
    epoch_data: EpochData,
    directory: Union[str, Path] = ".",
    now: Optional[datetime] = None,
) -> Path:
    """Write parallel_<timestamp>.sh, executable by its owner, and return its path."""
    moment = now if now is not None else datetime.now(timezone.utc)
    path = Path(directory) / f"parallel_{moment.strftime('%Y-%m-%d-%H_%M')}.sh"
    path.write_text(render_parallel_sh(data_file, weights_file, list(epoch_data.escrow_owners)))
    os.chmod(path, 0o755)
    return path