from collections import Counter
from types import MappingProxyType

from .enum import Component, ObjectKind


class Statistics(object):
    '''Running counts for one validation run.

    Bracket components are counted on their Begin field only, resources on
    every field classified as such and object kinds once per field.'''

    def __init__(self):
        self.counts = Counter()

    def __getitem__(self, kind):
        return self.counts[kind]

    def __repr__(self):
        return f'<{self.__class__.__name__}({dict(self.counts)!r})>'

    def update(self, classification):
        component = classification.component

        if classification.is_begin:
            self.counts[component] += 1
        elif component is Component.RESOURCE:
            self.counts[component] += 1

        if classification.object_kind is not ObjectKind.NONE:
            self.counts[classification.object_kind] += 1

    def snapshot(self):
        '''Read only view with every kind present, zero included'''
        kinds = [_ for _ in Component if _ is not Component.NONE] + \
                [_ for _ in ObjectKind if _ is not ObjectKind.NONE]

        return MappingProxyType({kind: self.counts[kind] for kind in kinds})
