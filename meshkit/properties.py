"""Named per-element property arrays kept in lockstep."""

import copy
import logging

from meshkit.core import InvalidInputException

logger = logging.getLogger(__name__)


class PropertyArray:
    """A named array of values with a default for new elements."""

    def __init__(self, name, default=None):
        self._name = name
        self._default = default
        self._data = []

    @property
    def name(self):
        """The name of the property."""
        return self._name

    @property
    def default(self):
        """The value new elements start with."""
        return self._default

    def reserve(self, n):
        """Reserve room for n elements (lists grow on demand)."""

    def resize(self, n):
        """Truncate or extend to n elements, filling with the default."""
        if n < len(self._data):
            del self._data[n:]
        else:
            self._data.extend(
                copy.copy(self._default) for _ in range(n - len(self._data))
            )

    def free_memory(self):
        """Release unused storage (lists manage this themselves)."""

    def push_back(self):
        """Append one element holding the default value."""
        self._data.append(copy.copy(self._default))

    def swap(self, i0, i1):
        """Exchange the values at positions i0 and i1."""
        self._data[i0], self._data[i1] = self._data[i1], self._data[i0]

    def clone(self):
        """Return an independent copy of this array."""
        other = PropertyArray(self._name, self._default)
        other._data = [copy.copy(value) for value in self._data]
        return other

    @property
    def data(self):
        """The underlying list of values."""
        return self._data

    def __len__(self):
        return len(self._data)

    def __getitem__(self, idx):
        return self._data[idx]

    def __setitem__(self, idx, value):
        self._data[idx] = value


class Property:
    """A handle to a property array; falsy when it refers to nothing."""

    def __init__(self, array=None):
        self._array = array

    def reset(self):
        """Detach the handle from its array."""
        self._array = None

    def __bool__(self):
        return self._array is not None

    def _checked(self):
        if self._array is None:
            raise InvalidInputException("access through an invalid property")
        return self._array

    @property
    def name(self):
        """Name of the referenced property array."""
        return self._checked().name

    def __getitem__(self, idx):
        return self._checked()[idx]

    def __setitem__(self, idx, value):
        self._checked()[idx] = value

    def vector(self):
        """Return the underlying list of values."""
        return self._checked().data


class PropertyContainer:
    """A set of named property arrays that all have the same length."""

    def __init__(self):
        self._arrays = []
        self._size = 0

    def copy(self):
        """Return a deep copy of the container and all its arrays."""
        other = PropertyContainer()
        other._arrays = [array.clone() for array in self._arrays]
        other._size = self._size
        return other

    __copy__ = copy

    def size(self):
        """Current length of the property arrays."""
        return self._size

    def n_properties(self):
        """Number of property arrays."""
        return len(self._arrays)

    def properties(self):
        """Names of all properties, in insertion order."""
        return [array.name for array in self._arrays]

    def _find(self, name):
        return next((a for a in self._arrays if a.name == name), None)

    def add(self, name, default=None):
        """Add a property; return an invalid handle if the name is taken."""
        if self._find(name) is not None:
            logger.warning(
                '[PropertyContainer] A property with name "%s" already '
                "exists. Returning invalid property.",
                name,
            )
            return Property()
        array = PropertyArray(name, default)
        array.resize(self._size)
        self._arrays.append(array)
        return Property(array)

    def exists(self, name):
        """Whether a property with this name exists."""
        return self._find(name) is not None

    def get(self, name):
        """Return the named property, or an invalid handle."""
        return Property(self._find(name))

    def get_or_add(self, name, default=None):
        """Return the named property, adding it first if missing."""
        prop = self.get(name)
        if not prop:
            prop = self.add(name, default)
        return prop

    def remove(self, prop):
        """Delete the array behind a handle and invalidate the handle."""
        for position, array in enumerate(self._arrays):
            if array is prop._array:
                del self._arrays[position]
                prop.reset()
                break

    def clear(self):
        """Delete all properties and reset the size to zero."""
        self._arrays.clear()
        self._size = 0

    def reserve(self, n):
        """Reserve room for n entries in every array."""
        for array in self._arrays:
            array.reserve(n)

    def resize(self, n):
        """Resize every array to n entries."""
        for array in self._arrays:
            array.resize(n)
        self._size = n

    def free_memory(self):
        """Release unused storage in every array."""
        for array in self._arrays:
            array.free_memory()

    def push_back(self):
        """Append a default entry to every array."""
        for array in self._arrays:
            array.push_back()
        self._size += 1

    def swap(self, i0, i1):
        """Exchange entries i0 and i1 in every array."""
        for array in self._arrays:
            array.swap(i0, i1)