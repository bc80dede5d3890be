"""CSV export of robot results."""

import csv
from pathlib import Path
from typing import IO, Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import RobotResult


class CSVWriter:
    """
    Writes one CSV row per finished robot, flushing as it goes.

    Output format:
        robot_id,x,y,orientation,lost,instructions,steps,error
        1,1,1,E,False,RFRFRFRF,8,
        2,3,3,N,True,FRRFLLFFRRFLL,8,
    """

    FIELDNAMES = ['robot_id', 'x', 'y', 'orientation', 'lost',
                  'instructions', 'steps', 'error']

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self._file: Optional[IO[str]] = None
        self._writer: Optional[csv.DictWriter] = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self) -> None:
        """Create the file (and its directory) and write the header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.output_path, 'w', newline='')
        self._writer = csv.DictWriter(self._file, fieldnames=self.FIELDNAMES)
        self._writer.writeheader()

    def append(self, result: "RobotResult") -> None:
        if not self.is_open:
            self.open()
        self._writer.writerow(result.to_csv_row())
        self._file.flush()

    def extend(self, results: Iterable["RobotResult"]) -> None:
        for result in results:
            self.append(result)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
        self._file = None
        self._writer = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
