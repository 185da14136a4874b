# kitrack

Building blocks for finding particle tracks from detector hits: abstract
hit and detector types, segments that link hits together, criteria that
decide whether two segments fit together, and a greedy selection of a
compatible, high-quality subset.

## Modules

- `kitrack.interfaces`: abstract base classes to describe your detector.
  - `SectorSystem` turns an integer sector code into a layer (`layer(sector)`)
    and a description (`info_on_sector(sector)`); it stores `n_layers`.
  - `SectorConnector` maps a sector to the set of sectors it may link to
    (`target_sectors(sector)`).
  - `Hit` holds `x`, `y`, `z`, `sector`, `is_virtual` and, for mini-vector
    hits, `phi`, `theta` and a 3D angle returned by `angle_3d()`. Subclasses
    provide the `sector_system` property; `layer` is then looked up from it.
  - `Track` declares `hits`, `qi`, `fit()`, `ndf`, `chi2` and `chi2_prob`.
- `kitrack.segment`: `Segment`, a list of hits with `children` (further
  inside) and `parents` (further outside), a `layer`, an `active` flag and a
  `state` list with one entry per covered layer. It offers `add_child`,
  `add_parent`, `delete_child`, `delete_parent`, `raise_state` (raises the
  innermost state), `inner_state`, `outer_state` and `set_skipped_layers`.
- `kitrack.criterion`: the abstract `Criterion` base class and
  `wrap_to_pi(angle)`, which shifts an angle by one full turn when it lies
  outside [-pi, pi].
- `kitrack.criteria_two`: criteria for two 1-hit segments:
  `Crit2DeltaPhi`, `Crit2DeltaPhiMV`, `Crit2DeltaRho`, `Crit2DeltaThetaMV`,
  `Crit2DistanceMV`, `Crit2RZRatio`, `Crit2StraightTrackRatio`.
- `kitrack.criteria_three`: criteria for two 2-hit segments:
  `Crit3_2DAngle`, `Crit3_3DAngle`, `Crit3ChangeRZRatio`, `Crit3NoZigZagMV`.
- `kitrack.criteria_four`: criteria for two 3-hit segments:
  `Crit4_2DAngleChange`, `Crit4_3DAngleChange`, `Crit4NoZigZag`.
- `kitrack.subset`: `Subset`, which collects elements (`add`, `add_all`) and
  exposes `elements`, `accepted` and `rejected`, and `SubsetSimple`, which
  fills `accepted` and `rejected` with `calculate_best_set`.
- `kitrack.exceptions`: `KiTrackError` and its subclasses `OutOfRange`,
  `InvalidParameter`, `BadSegmentLength` and `UnknownCriterion`. Their
  message is prefixed with the kind of error, for example
  `KiTrack::BadSegmentLength: ...`.

## Installation

```
pip install .
```

## Describing hits

`Hit` is abstract: give it a sector system.

```python
from kitrack.interfaces import Hit, SectorSystem


class Layers(SectorSystem):
    def layer(self, sector):
        return sector

    def info_on_sector(self, sector):
        return f"layer {sector}"


LAYERS = Layers(n_layers=5)


class MyHit(Hit):
    @property
    def sector_system(self):
        return LAYERS


hit = MyHit(1.0, 0.0, 10.0, sector=1)
print(hit.layer)  # 1
```

## Criteria

Each criterion is built with a lower and an upper limit and answers
`are_compatible(parent, child)` for two `Segment` objects; the parent is the
outer segment, the child the inner one. A value equal to a limit passes.
A criterion raises `BadSegmentLength` when the segments do not hold the
number of hits it needs (1, 2 or 3, by module).

With `save_values=True`, the quantities computed in the last call are kept
in the criterion's `values` dictionary:

```python
from kitrack.criteria_two import Crit2RZRatio
from kitrack.segment import Segment

parent = Segment(MyHit(2.0, 0.0, 20.0, sector=2))
child = Segment(MyHit(1.0, 0.0, 10.0, sector=1))

crit = Crit2RZRatio(0.9, 1.5, save_values=True)
print(crit.are_compatible(parent, child))  # True
print(crit.values["Crit2_RZRatio"])        # about 1.005
```

## Choosing a compatible subset

```python
from kitrack.subset import SubsetSimple

subset = SubsetSimple()
subset.add_all(["a", "b", "c"])
quality = {"a": 0.9, "b": 0.5, "c": 0.7}
clashes = {frozenset({"a", "b"})}

subset.calculate_best_set(
    lambda x, y: frozenset({x, y}) not in clashes,
    quality.get,
)
print(subset.accepted)  # ['a', 'c']
print(subset.rejected)  # ['b']
```

The element with the highest quality is accepted, every element that
clashes with it is rejected, and the procedure repeats on what remains.

## What the package does not do

It provides the pieces, not a track finder. There is no cellular automaton
that raises segment states and lengthens segments, no builder that turns
hits into connected segments, no neural-network subset selection, and no
criteria based on fitted circles or helices. Connecting segments and
collecting tracks is left to the code that uses these classes. There is no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```