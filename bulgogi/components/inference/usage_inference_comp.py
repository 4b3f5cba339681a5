"""Usage inference - decide whether each module is a library or an entry point.

Rules, in precedence order:

1. A module listed by any library target is a Libmodule (library dominance).
2. A module entry-marked by an executable target is an Exemodule, unless that
   target marks more than one module (see find_entry_conflicts).
3. Inside an executable target at most one module is the Exemodule:
   - a sibling already resolved Exemodule makes every other module a Libmodule
   - the only module of a target, or the last unresolved one when all siblings
     are Libmodules, becomes the Exemodule
4. Whatever is still unresolved afterwards is Ambiguous, as is a module that
   two targets would classify differently.

Rule 3 is applied as a work-list in synchronous rounds: every round derives its
verdicts from the state left by the previous round only. Modules unresolved
between rounds play the role of "resolution in progress", so mutually
dependent siblings never recurse, and the outcome does not depend on the order
of targets or dependency lists.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from bulgogi.components.project.dependency_model_comp import (
    entry_marked,
    executables,
    libraries,
    modules,
)
from bulgogi.helpers.dto.cmake_dto import EntryConflict
from bulgogi.helpers.dto.project_dto import DependencyModel
from bulgogi.helpers.dto.usage_dto import Usage, UsageLedger

logger = logging.getLogger(__name__)


def find_entry_conflicts(model: DependencyModel) -> list[EntryConflict]:
    """
    Executable targets marking more than one distinct module as their entry.

    Markers on library targets are ignored (library dominance wins anyway).
    """
    conflicts = []
    for target in sorted(executables(model)):
        marked = entry_marked(model, target)
        if len(marked) > 1:
            conflicts.append(EntryConflict(target=target, modules=tuple(marked)))
    return conflicts


def infer_usages(model: DependencyModel, ledger: UsageLedger | None = None) -> UsageLedger:
    """
    Resolve every module of the project in one pass.

    Verdicts already present in ledger are taken as given and never
    recomputed; every other module of the project is added to it.

    Args:
        model: Project dependency model (read-only)
        ledger: Per-pass verdict cache to fill (a fresh one when None)

    Returns:
        The ledger, now holding a verdict for every module of the project
    """
    if ledger is None:
        ledger = {}

    all_modules = modules(model)
    if all(m in ledger for m in all_modules):
        return ledger

    # Known verdicts; Ambiguous entries from the ledger stay stuck
    state: dict[str, Usage] = {m: u for m, u in ledger.items() if u is not Usage.AMBIGUOUS}
    stuck: set[str] = {m for m, u in ledger.items() if u is Usage.AMBIGUOUS}

    # 1) Library dominance
    for lib in libraries(model):
        for m in modules(model, lib):
            if m not in stuck:
                state.setdefault(m, Usage.LIBMODULE)

    # 2) Explicit entry markers
    exes = executables(model)
    conflicted = {c.target for c in find_entry_conflicts(model)}
    for target in exes:
        marked = entry_marked(model, target)
        if target in conflicted or not marked:
            continue
        entry = marked[0]
        if state.get(entry) is Usage.LIBMODULE:
            logger.warning(
                f"[usage_inference] Entry marker on '{entry}' in '{target}' ignored: a library target uses it"
            )
            continue
        if entry not in stuck:
            state.setdefault(entry, Usage.EXEMODULE)

    # 3) Propagate inside executable targets until nothing changes
    siblings = {target: set(modules(model, target)) for target in exes}
    rounds = 0
    while True:
        proposals: dict[str, set[Usage]] = defaultdict(set)
        for target, mods in siblings.items():
            if not mods:
                continue
            open_mods = [m for m in mods if m not in state and m not in stuck]
            if not open_mods:
                continue
            if any(state.get(m) is Usage.EXEMODULE for m in mods):
                for m in open_mods:
                    proposals[m].add(Usage.LIBMODULE)
            elif len(open_mods) == 1 and all(state.get(m) is Usage.LIBMODULE for m in mods if m != open_mods[0]):
                proposals[open_mods[0]].add(Usage.EXEMODULE)

        if not proposals:
            break

        rounds += 1
        for m, verdicts in proposals.items():
            if len(verdicts) == 1:
                state[m] = next(iter(verdicts))
            else:
                logger.debug(f"[usage_inference] '{m}' is both linked and an entry point across targets")
                stuck.add(m)

    for m in all_modules:
        if m not in ledger:
            ledger[m] = state.get(m, Usage.AMBIGUOUS)

    ambiguous = sorted(m for m in all_modules if ledger[m] is Usage.AMBIGUOUS)
    logger.debug(
        f"[usage_inference] Resolved {len(all_modules)} modules in {rounds} propagation rounds, "
        f"{len(ambiguous)} ambiguous"
    )
    return ledger


def resolve(model: DependencyModel, module: str, ledger: UsageLedger) -> Usage:
    """
    Usage of one module, memoized in ledger.

    A module already in the ledger is returned as is. Otherwise the whole
    project is resolved into the ledger first, so every later call in the same
    pass is a lookup.

    Never raises: an unclassifiable (or unreferenced) module is Ambiguous.
    """
    if module in ledger:
        return ledger[module]
    infer_usages(model, ledger)
    return ledger.setdefault(module, Usage.AMBIGUOUS)
