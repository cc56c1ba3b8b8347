import logging
from enum import Enum, auto


class ChunkPhase(Enum):
    '''Enum to state the actual phase of a chunk'''
    INIT        = 0
    RELAYOUTING = auto()
    UNPACKING   = auto()
    DONE        = auto()


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the (internal) length of the string contained in the field named 'data'
    strictly connected to the value of the field named 'length'.

    The expression is resolved like a python module path: a leading '.'
    indicates we refer to a field at the same level (i.e. a sibling living
    in the same father), each following component is an attribute lookup.
    '''
    def __init__(self, expression):
        if not expression.startswith('.'):
            raise ValueError(f'only relative dependencies are supported, got \'{expression}\'')

        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve_field(self, instance):
        if instance.father is None:
            raise AttributeError(f'cannot resolve \'{self.expression}\' for a field without father')

        field = instance.father
        # '.miao'.split(".") -> ['', 'miao']
        for component_name in self.expression.split('.')[1:]:
            field = getattr(field, component_name)

        return field

    def resolve(self, instance):
        '''With this method we resolve the attribute with respect to the instance
        passed as argument.'''
        value = self.resolve_field(instance).value

        self.logger.debug(' resolved \'%s\' with value %s' % (self.expression, value))

        return value
