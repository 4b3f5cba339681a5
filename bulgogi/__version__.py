"""Version information for bulgogi."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to project.yaml or generated descriptors
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Usage inference rewrite
#         - Work-list propagation replaces recursive ledger walking (order independent)
#         - Conflicting entry markers reported instead of silently picking one
#         - Generation refuses to write anything while any target is unresolved
# 0.1.0 - Initial pre-alpha release
#         - project.yaml loading/saving with '*' entry markers
#         - module add/rm with src/inc scaffolding
#         - CMakeLists.txt generation from templates
