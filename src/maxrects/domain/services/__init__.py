"""Domain services: free-space maintenance, scoring and the packer.

Import from the submodules directly; ``maxrects.domain.entities`` depends on
``free_space`` while ``max_rects`` depends on the entities.
"""
