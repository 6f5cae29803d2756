"""
Row recording for slice traversals with CSV and JSONL output.

Each traversal sample (drift checks, walk summaries) is logged as a flat
row with a UTC timestamp; ``get_summary`` gives numpy statistics over the
numeric columns.
"""
import csv
import json
import os
import logging
from typing import Dict, List, Any
from datetime import datetime, timezone
import numpy as np

logger = logging.getLogger(__name__)


class SimpleRecorder:
    """General purpose recorder with CSV and JSONL output."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.rows: List[Dict] = []
        self._metadata = {
            'created_at': datetime.now(timezone.utc).isoformat(),
            'config_hash': None
        }

    def set_metadata(self, **kwargs):
        """Set metadata that will be included in JSONL recordings."""
        self._metadata.update(kwargs)

    def log(self, row: Dict):
        """Log a dictionary row with automatic type conversion."""
        if not self.enabled:
            return

        clean_row = {'timestamp': datetime.now(timezone.utc).isoformat()}

        for k, v in row.items():
            if isinstance(v, (bool, np.bool_)):
                clean_row[k] = bool(v)
            elif isinstance(v, (int, np.integer)):
                clean_row[k] = int(v)
            elif isinstance(v, (float, np.floating)):
                clean_row[k] = float(v)
            elif isinstance(v, complex):
                clean_row[k] = [v.real, v.imag]
            elif isinstance(v, np.ndarray):
                if v.size == 1:
                    clean_row[k] = float(v.item())
                else:
                    clean_row[k] = v.tolist()
            elif isinstance(v, (list, tuple)):
                clean_row[k] = list(v)
            elif v is None:
                clean_row[k] = None
            else:
                clean_row[k] = str(v)

        self.rows.append(clean_row)

    def dump_csv(self, path: str):
        """Dump rows to CSV; list values are written as their string form."""
        if not self.enabled or not self.rows:
            return

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        csv_rows = []
        for row in self.rows:
            csv_rows.append({k: (str(v) if isinstance(v, list) else v) for k, v in row.items()})

        keys = sorted({k for row in csv_rows for k in row})
        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=keys)
            writer.writeheader()
            writer.writerows(csv_rows)
        logger.info(f"Saved {len(csv_rows)} rows to CSV: {path}")

    def dump_jsonl(self, path: str):
        """Dump to JSONL, metadata on the first line."""
        if not self.enabled or not self.rows:
            return

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        with open(path, 'w') as f:
            f.write(json.dumps({'_metadata': self._metadata}) + '\n')
            for row in self.rows:
                f.write(json.dumps(row) + '\n')

        logger.info(f"Saved {len(self.rows)} rows to JSONL: {path}")

    def dump_all_formats(self, base_path: str):
        """Convenience method to dump to all supported formats."""
        base_dir = os.path.dirname(base_path)
        base_name = os.path.splitext(os.path.basename(base_path))[0]

        self.dump_csv(os.path.join(base_dir, f"{base_name}.csv"))
        self.dump_jsonl(os.path.join(base_dir, f"{base_name}.jsonl"))

    def clear(self):
        """Clear all logged rows."""
        self.rows.clear()

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics of logged data."""
        if not self.rows:
            return {'row_count': 0}

        summary = {
            'row_count': len(self.rows),
            'first_timestamp': self.rows[0].get('timestamp'),
            'last_timestamp': self.rows[-1].get('timestamp'),
            'columns': sorted({k for row in self.rows for k in row})
        }

        numeric_cols: Dict[str, List[float]] = {}
        for row in self.rows:
            for k, v in row.items():
                if isinstance(v, (int, float)) and not isinstance(v, bool):
                    numeric_cols.setdefault(k, []).append(v)

        summary['numeric_stats'] = {}
        for col, values in numeric_cols.items():
            summary['numeric_stats'][col] = {
                'count': len(values),
                'mean': float(np.mean(values)),
                'std': float(np.std(values)),
                'min': float(np.min(values)),
                'max': float(np.max(values))
            }

        return summary
