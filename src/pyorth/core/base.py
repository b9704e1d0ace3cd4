# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""This module provides base classes from which most classes in pyOrth inherit.

:class:`BasicObject` gives each deriving *class* its own
:mod:`~pyorth.core.logger` instance accessible through its `logger`
attribute, with the logger name set to the module and class name. Logging
can be disabled and re-enabled for each *instance* using the
:meth:`BasicObject.disable_logging` and :meth:`BasicObject.enable_logging`
methods.

:class:`ImmutableObject` derives from :class:`BasicObject` and locks each
instance after its `__init__` method has returned. Each attempt to change
one of its public attributes raises a :class:`~pyorth.core.exceptions.ConstError`.
Private attributes (of the form `_name`) are exempted from this rule.
:meth:`ImmutableObject.with_` creates a copy of an instance with some changed
`__init__` arguments.
"""

import abc
import inspect

from pyorth.core import logger
from pyorth.core.exceptions import ConstError


class UberMeta(abc.ABCMeta):

    def __init__(cls, name, bases, namespace):
        """Metaclass of :class:`BasicObject`.

        I create a logger for each class I create.
        """
        cls._logger = logger.getLogger(f'{cls.__module__.replace("__main__", "pyorth")}.{name}')
        abc.ABCMeta.__init__(cls, name, bases, namespace)

    def __new__(cls, classname, bases, classdict):
        """I record the names of the `__init__` arguments of the new class."""
        if '_init_arguments' in classdict:
            raise ValueError('_init_arguments is a reserved class attribute for subclasses of BasicObject')

        c = abc.ABCMeta.__new__(cls, classname, bases, classdict)

        init_args = []
        for arg, description in inspect.signature(c.__init__).parameters.items():
            if arg == 'self':
                continue
            if description.kind in (description.POSITIONAL_OR_KEYWORD, description.POSITIONAL_ONLY,
                                    description.KEYWORD_ONLY):
                init_args.append(arg)
        c._init_arguments = tuple(init_args)

        return c


class BasicObject(metaclass=UberMeta):
    """Base class for most classes in pyOrth.

    Attributes
    ----------
    logger
        A per-class instance of :class:`logging.Logger` with the class
        name as prefix.
    logging_disabled
        `True` if logging has been disabled.
    name
        The name of the instance. If not set by the user, the name is
        set to the class name.
    """

    @property
    def name(self):
        n = getattr(self, '_name', None)
        return n or type(self).__name__

    @name.setter
    def name(self, n):
        self._name = n

    @property
    def logging_disabled(self):
        return self._logger is logger.dummy_logger

    @property
    def logger(self):
        return self._logger

    def disable_logging(self, doit=True):
        """Disable logging output for this instance."""
        if doit:
            self._logger = logger.dummy_logger
        elif '_logger' in self.__dict__:
            del self._logger

    def enable_logging(self, doit=True):
        """Enable logging output for this instance."""
        self.disable_logging(not doit)


class ImmutableMeta(UberMeta):
    """Metaclass for :class:`ImmutableObject`."""

    def __new__(cls, classname, bases, classdict):
        c = UberMeta.__new__(cls, classname, bases, classdict)

        # make inspect.signature(c) return the signature of __init__
        sig = inspect.signature(c.__init__)
        c.__signature__ = sig.replace(parameters=tuple(sig.parameters.values())[1:])
        return c

    def __call__(self, *args, **kwargs):
        instance = super().__call__(*args, **kwargs)
        assert all(hasattr(instance, arg) for arg in instance._init_arguments), \
            (f'__init__ arguments {[arg for arg in instance._init_arguments if not hasattr(instance, arg)]} '
             f'of class {self.__name__} not available as instance attributes\n'
             f'(all __init__ args need to be attributes for with_ to work).')
        instance._locked = True
        return instance


class ImmutableObject(BasicObject, metaclass=ImmutableMeta):
    """Base class for immutable objects in pyOrth.

    Instances of `ImmutableObject` are immutable in the sense that
    after execution of `__init__`, any modification of a non-private
    attribute will raise an exception.
    """

    _locked = False

    def __init__(self):
        pass

    def __setattr__(self, key, value):
        """Depending on _locked state delegate the setattr call to object or raise an Exception."""
        if not self._locked or key[0] == '_':
            return object.__setattr__(self, key, value)
        else:
            raise ConstError(f'Changing "{key}" is not allowed in locked "{self.__class__}"')

    def with_(self, **kwargs):
        """Returns a copy with changed attributes.

        A new class instance is created with the given keyword arguments as
        arguments for `__init__`. Missing arguments are obtained from instance
        attributes with the same name.

        Parameters
        ----------
        `**kwargs`
            Names of attributes to change with their new values. Each attribute name
            has to be an argument to `__init__`.

        Returns
        -------
        Copy of `self` with changed attributes.
        """
        for arg in self._init_arguments:
            if arg not in kwargs:
                try:
                    kwargs[arg] = getattr(self, arg)
                except AttributeError as e:
                    raise ValueError(f"Cannot find missing __init__ argument '{arg}' for '{self.__class__}' "
                                     f"as attribute of '{self}'") from e

        c = type(self)(**kwargs)

        if self.logging_disabled:
            c.disable_logging()

        return c
