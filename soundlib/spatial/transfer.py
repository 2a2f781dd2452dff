"""
Transfer-Function Store

Measured transfer functions (SLTFs) live in the file system, one DDB file
per angle and ear:

    {subject}/SLTF/SLTF_{angle}_{ear}.DDB

The store resolves these paths and loads the files through the DXX codec.
Transfer functions are immutable for a render, so a store may memoize
them; a store lives for one render_move call only.
"""

import os
import logging
import threading
from typing import Dict, Tuple, Union

from ..config import TRANSFER_FUNCTION_DIR, TRANSFER_FUNCTION_PREFIX, ANGLE_RESOLUTION
from ..dxx import SampleFormat, read_file
from ..exceptions import InvalidArgumentError, MissingTransferFunctionError
from ..utils import Ear, TransferFunction

# Set up logging
logger = logging.getLogger(__name__)


class TransferFunctionStore:
    """Loader for the transfer functions of one subject"""

    def __init__(self, subject: Union[str, os.PathLike], cache: bool = True):
        """
        Initialize a store.

        Args:
            subject: Directory of the subject, holding the SLTF directory
            cache: Whether to keep loaded transfer functions in memory
        """
        self.subject = os.fspath(subject)
        self.cache_enabled = cache
        self._cache: Dict[Tuple[int, Ear], TransferFunction] = {}
        self._lock = threading.Lock()

    def path_for(self, angle: int, ear: Ear) -> str:
        """
        Path of the transfer function for an angle and ear.

        Args:
            angle: Angle in tenths of a degree, in [0, 3600)
            ear: Ear of the measurement
        """
        if not 0 <= angle < ANGLE_RESOLUTION:
            raise InvalidArgumentError(f"Angle must be in [0, {ANGLE_RESOLUTION}), got {angle}")
        filename = f"{TRANSFER_FUNCTION_PREFIX}_{angle}_{ear.value}.{SampleFormat.DOUBLE_BINARY.extension}"
        return os.path.join(self.subject, TRANSFER_FUNCTION_DIR, filename)

    def load(self, angle: int, ear: Ear) -> TransferFunction:
        """
        Load the transfer function for an angle and ear.

        Returns:
            float64 array of the impulse response. Cached arrays are
            returned read-only.

        Raises:
            MissingTransferFunctionError: If no file exists for the angle
        """
        key = (angle, ear)
        if self.cache_enabled:
            with self._lock:
                cached = self._cache.get(key)
            if cached is not None:
                logger.debug(f"Transfer function cache hit for angle {angle} ear {ear.value}")
                return cached

        path = self.path_for(angle, ear)
        if not os.path.isfile(path):
            raise MissingTransferFunctionError(angle, ear.value, path)
        transfer_function = read_file(path)

        if self.cache_enabled:
            transfer_function.setflags(write=False)
            with self._lock:
                self._cache[key] = transfer_function
        return transfer_function

    def clear(self) -> None:
        """Drop all cached transfer functions."""
        with self._lock:
            self._cache.clear()

    @property
    def cached_count(self) -> int:
        """Number of transfer functions held in the cache"""
        with self._lock:
            return len(self._cache)
