# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""This module contains pyOrth's facilities for handling default values.

A default value in pyOrth is always the default value of some
function argument. To mark the value of an optional function argument
as a user-modifiable default value use the :func:`defaults` decorator.
As an additional feature, if `None` is passed for such an argument,
its default value is used instead of `None`. This is useful
for writing code of the following form::

    @defaults('check_tol')
    def algorithm(vectors, check_tol=1e-3):
        ...

    def method_called_by_user(vectors, check_tol_for_algorithm=None):
        ...
        algorithm(vectors, check_tol=check_tol_for_algorithm)
        ...

If the user does not provide `check_tol_for_algorithm` to
`method_called_by_user`, the default `1e-3` is automatically chosen
without the implementor of `method_called_by_user` having to care
about this.

The user interface for handling default values in pyOrth is provided
by :func:`set_defaults`, :func:`load_defaults_from_file`,
:func:`write_defaults_to_file` and :func:`print_defaults`.

If pyOrth is imported, it will automatically search for a configuration
file named `pyorth_defaults.py` in the current working directory.
If found, the file is loaded via :func:`load_defaults_from_file`.
However, as a security precaution, the file will only be loaded if it is
owned by the user running the Python interpreter
(:func:`load_defaults_from_file` uses `exec` to load the configuration).
As an alternative, the environment variable `PYORTH_DEFAULTS` can be
used to specify the path of a configuration file. If empty or set to
`NONE`, no configuration file will be loaded whatsoever.
"""


from collections import defaultdict
import functools
import importlib
import inspect
import pkgutil
import textwrap
import threading

from pyorth.tools.table import format_table

SOURCES = ('user', 'file', 'code')


class DefaultContainer:
    """Registry of all default values defined in pyOrth.

    For each path `module.function.argument` the container stores the
    decorated function and up to three values, keyed by their source:
    `'code'` (the signature default), `'file'` (loaded via
    :func:`load_defaults_from_file`) and `'user'` (set via :func:`set_defaults`).
    The first available value in this order of precedence ``user > file > code``
    is the active one. Not to be used directly.
    """

    def __init__(self):
        self._data = defaultdict(dict)
        self.registered_functions = set()
        self.changes = 0
        self.changes_lock = threading.Lock()

    def register(self, func, argnames):
        if func.__doc__ is not None:
            func.__doc__ = (inspect.cleandoc(func.__doc__)
                            + '\n\nDefaults\n--------\n'
                            + '\n'.join(textwrap.wrap(', '.join(argnames), 80))
                            + '\n(see :mod:`pyorth.core.defaults`)')

        params = inspect.signature(func).parameters
        for n in argnames:
            if n not in params:
                raise ValueError(f"Decorated function has no argument '{n}'")
            if params[n].default is params[n].empty:
                raise ValueError(f"Decorated function has no default for argument '{n}'")

        path = f'{func.__module__}.{func.__qualname__}'
        if path in self.registered_functions:
            raise ValueError(f'Function with name {path} already registered for default values!')
        self.registered_functions.add(path)

        for n in argnames:
            entry = self._data[f'{path}.{n}']
            entry['func'] = func
            entry['code'] = params[n].default

        # values loaded from a file before the function was defined take precedence
        func.argnames = tuple(params)
        func.defaultsdict = {n: self.get(f'{path}.{n}')[0] for n in argnames}
        self._update_signature(func)

    @staticmethod
    def _update_signature(func):
        sig = inspect.signature(func)
        params = [p.replace(default=func.defaultsdict[n]) if n in func.defaultsdict else p
                  for n, p in sig.parameters.items()]
        func.__signature__ = sig.replace(parameters=params)

    def _lookup_function(self, key):
        func = self._data[key].get('func')
        if func is None:
            # the defining module might not have been imported yet
            head = key.split('.')[:-2]
            while head:
                try:
                    importlib.import_module('.'.join(head))
                    break
                except ImportError:
                    head.pop()
            func = self._data[key].get('func')
        if func is None:
            del self._data[key]
            raise KeyError(key)
        return func

    def update(self, values, type='user'):
        assert type in ('user', 'file')
        with self.changes_lock:
            self.changes += 1

        changed = set()
        for key, value in values.items():
            func = self._lookup_function(key)
            self._data[key][type] = value
            func.defaultsdict[key.split('.')[-1]] = value
            changed.add(func)

        for func in changed:
            self._update_signature(func)

    def get(self, key):
        values = self._data[key]
        for source in SOURCES:
            if source in values:
                return values[source], source
        raise ValueError(f'No default value for {key}')

    def __getitem__(self, key):
        assert isinstance(key, str)
        return self.get(key)[0]

    def keys(self):
        return self._data.keys()

    def import_all(self):
        for package in {k.split('.')[0] for k in self._data} | {'pyorth'}:
            _import_all(package)


_default_container = DefaultContainer()


def defaults(*args):
    """Function decorator for marking function arguments as user-configurable defaults.

    When the decorated function is called, each marked argument which has not
    been passed, or which has been passed as `None`, receives its current
    default value. This is the value set via :func:`set_defaults` if any,
    else the value loaded via :func:`load_defaults_from_file` if any, else
    the value in the function signature.

    The default of argument `arg` of function `f` in module `p.m` is
    addressed by the path `p.m.f.arg`.

    Parameters
    ----------
    args
        Names of the arguments of the decorated function to mark as pyOrth
        defaults. Each of these arguments needs a default value.
    """
    assert all(isinstance(arg, str) for arg in args)

    def the_decorator(decorated_function):
        if not args:
            return decorated_function

        _default_container.register(decorated_function, args)

        # ensure that __signature__ is not copied
        @functools.wraps(decorated_function, updated=())
        def defaults_wrapper(*wrapper_args, **wrapper_kwargs):
            kwargs = dict(decorated_function.defaultsdict)
            for k, v in zip(decorated_function.argnames, wrapper_args):
                if k in wrapper_kwargs:
                    raise TypeError(f"{decorated_function.__name__} got multiple values for argument '{k}'")
                wrapper_kwargs[k] = v
            for k, v in wrapper_kwargs.items():
                if v is not None or k not in kwargs:
                    kwargs[k] = v
            return decorated_function(**kwargs)

        return defaults_wrapper

    return the_decorator


def _import_all(package_name='pyorth'):
    package = importlib.import_module(package_name)
    if not hasattr(package, '__path__'):
        return

    def onerror(name):
        from pyorth.core.logger import getLogger
        getLogger('pyorth.core.defaults._import_all').warning(f'Failed to import {name}')

    for _, name, _ in pkgutil.walk_packages(package.__path__, package_name + '.', onerror=onerror):
        try:
            importlib.import_module(name)
        except ImportError:
            onerror(name)


def print_defaults(import_all=True, shorten_paths=2):
    """Print all |default| values set in pyOrth.

    Parameters
    ----------
    import_all
        Signature defaults are only known once their module has been imported.
        If `True`, all of pyOrth's modules are imported first so that the
        list is complete.
    shorten_paths
        Number of leading path components to strip. The last two path
        components are always printed.
    """
    if import_all:
        _default_container.import_all()

    rows = [['path (shortened)' if shorten_paths else 'path', 'value', 'source']]
    for k in sorted(_default_container.keys()):
        v, source = _default_container.get(k)
        parts = k.split('.')
        if len(parts) >= shorten_paths + 2:
            parts = parts[shorten_paths:]
        rows.append(['.'.join(parts), repr(v), source])
    print(format_table(rows, title='pyOrth defaults'))
    print()


def write_defaults_to_file(filename='./pyorth_defaults.py', packages=('pyorth',)):
    """Write the currently active |default| values to a configuration file.

    The file is an ordinary Python script defining a dict `d` and can be
    edited at will. Defaults which still have their signature value are
    written as comments. Load it again with :func:`load_defaults_from_file`.

    Parameters
    ----------
    filename
        Name of the file to write to.
    packages
        Names of the packages whose sub-modules are imported before writing,
        so that all defaults are known.
    """
    for package in packages:
        _import_all(package)

    keys = sorted(_default_container.keys())
    key_width = max((len(k) for k in keys), default=0) + 2

    with open(filename, 'wt') as f:
        print('# pyOrth defaults config file\n'
              '# This file has been automatically created by pyorth.core.defaults.write_defaults_to_file.\n\n'
              'd = {}\n', file=f)
        last_function = None
        for k in keys:
            v, source = _default_container.get(k)
            function = k.rsplit('.', 1)[0]
            if last_function is not None and function != last_function:
                print('', file=f)
            last_function = function
            comment = '# ' if source == 'code' else ''
            print(f"{comment}d[{repr(k):{key_width}}] = {v!r}", file=f)

    print('Written defaults to file ' + filename)


def load_defaults_from_file(filename='./pyorth_defaults.py'):
    """Load |default| values from a configuration file.

    The file is executed with :func:`exec` and has to define a dict `d`
    mapping default paths to values. Only load files you trust.
    Suitable files are created by :func:`write_defaults_to_file`.

    Parameters
    ----------
    filename
        Path of the configuration file.
    """
    env = {}
    with open(filename, 'rt') as f:
        exec(f.read(), env)
    try:
        _default_container.update(env['d'], type='file')
    except KeyError as e:
        raise KeyError(f'Error loading defaults from file. Key {e} does not correspond to a default') from e


def set_defaults(defaults):
    """Set |default| values.

    Values set here override signature defaults as well as values loaded
    from a file.

    Parameters
    ----------
    defaults
        Dict mapping default paths (see :func:`defaults`) to their new values.
    """
    try:
        _default_container.update(defaults, type='user')
    except KeyError as e:
        raise KeyError(f'Error setting defaults. Key {e} does not correspond to a default') from e


def get_defaults(user=True, file=True, code=True):
    """Return the active |default| values as a dict, filtered by their source.

    Parameters
    ----------
    user
        Include values set via :func:`set_defaults`.
    file
        Include values loaded via :func:`load_defaults_from_file`.
    code
        Include unmodified signature defaults.
    """
    selected = {'user': user, 'file': file, 'code': code}
    result = {}
    for k in _default_container.keys():
        v, source = _default_container.get(k)
        if selected[source]:
            result[k] = v
    return result


def defaults_changes():
    """Number of changes made to pyOrth's global |defaults| since program start."""
    return _default_container.changes
