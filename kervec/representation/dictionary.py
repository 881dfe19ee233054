"""Feature name <-> integer code registry shared by sparse vectors."""

import logging
import threading
from typing import Dict, NamedTuple, Optional

logger = logging.getLogger(__name__)

NOT_FOUND = 0


class DictionarySnapshot(NamedTuple):
    """Frozen state of a FeatureDictionary."""
    codes: Dict[str, int]
    next_code: int


class FeatureDictionary:
    """
    Bidirectional, append-only mapping between feature names and codes.
    
    Codes are never reused or removed while the dictionary lives. The value
    ``NOT_FOUND`` (0) is never assigned, so ``lookup`` can use it to signal
    absence.
    
    ``get_or_add`` is safe to call from several threads; the check-then-insert
    sequence runs under a lock.
    
    Parameters:
        start: First code to hand out
    """
    
    def __init__(self, start: int = 1):
        self._start = start
        self._name_to_code: Dict[str, int] = {}
        self._code_to_name: Dict[int, str] = {}
        self._next_code = start if start != NOT_FOUND else start + 1
        self._lock = threading.Lock()
    
    def __len__(self) -> int:
        return len(self._name_to_code)
    
    def __contains__(self, name: str) -> bool:
        return name in self._name_to_code
    
    def __repr__(self) -> str:
        return f"FeatureDictionary(size={len(self)})"
    
    def lookup(self, name: str) -> int:
        """
        Code assigned to ``name``, or ``NOT_FOUND`` if it was never registered.
        """
        return self._name_to_code.get(name, NOT_FOUND)
    
    def get_or_add(self, name: str) -> int:
        """
        Return the code of ``name``, registering it first if needed.
        
        Parameters:
            name: Feature name
        
        Returns:
            The (possibly new) code of the feature
        """
        code = self._name_to_code.get(name)
        if code is not None:
            return code
        
        with self._lock:
            # Another thread may have registered it meanwhile
            code = self._name_to_code.get(name)
            if code is not None:
                return code
            
            code = self._next_code
            self._name_to_code[name] = code
            self._code_to_name[code] = name
            self._next_code += 1
            if self._next_code == NOT_FOUND:
                self._next_code += 1
        
        logger.debug(f"Registered feature {name!r} -> {code}")
        return code
    
    def get_name(self, code: int) -> Optional[str]:
        """Name registered under ``code``, or None."""
        return self._code_to_name.get(code)
    
    def snapshot(self) -> DictionarySnapshot:
        """
        Copy of the current state.
        
        Persisting a snapshot alongside data is the only way to reproduce
        the same name -> code assignment in another run.
        """
        with self._lock:
            return DictionarySnapshot(dict(self._name_to_code), self._next_code)
    
    def restore(self, snapshot: DictionarySnapshot):
        """
        Replace the current state with ``snapshot``.
        
        Vectors built against codes that the snapshot does not contain
        become meaningless; intended for tests and for loading persisted
        codes before any vector exists.
        """
        with self._lock:
            self._name_to_code = dict(snapshot.codes)
            self._code_to_name = {c: n for n, c in snapshot.codes.items()}
            self._next_code = snapshot.next_code
    
    def reset(self):
        """Forget every registered feature."""
        with self._lock:
            self._name_to_code = {}
            self._code_to_name = {}
            self._next_code = self._start if self._start != NOT_FOUND else self._start + 1


_default_dictionary = FeatureDictionary()


def get_default_dictionary() -> FeatureDictionary:
    """The process-wide dictionary used by sparse vectors unless one is given."""
    return _default_dictionary
