"""Component trees and assemblies built on them."""

from __future__ import annotations

import weakref

from huzlip.component import Component


class ComponentTreeNode:
    """A node holding a component, its children and a weak link to its parent."""

    def __init__(self, component: Component | None) -> None:
        self.component = component
        self._children: list[ComponentTreeNode] = []
        self._parent: weakref.ReferenceType[ComponentTreeNode] | None = None

    @property
    def children(self) -> list[ComponentTreeNode]:
        return list(self._children)

    @property
    def parent(self) -> ComponentTreeNode | None:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: ComponentTreeNode | None) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def add_child(self, child: ComponentTreeNode) -> None:
        """Append a child and make this node its parent."""
        self._children.append(child)
        child.parent = self

    def collect_components(self) -> list[Component]:
        """Components of this subtree in pre-order."""
        found: list[Component] = []
        stack: list[ComponentTreeNode] = [self]
        while stack:
            node = stack.pop()
            if node.component is not None:
                found.append(node.component)
            stack.extend(reversed(node._children))
        return found


class Assembly:
    """An assembly rooted at one component."""

    def __init__(self, root_component: Component) -> None:
        self._root = ComponentTreeNode(root_component)

    @property
    def root(self) -> ComponentTreeNode:
        return self._root

    def all_components(self) -> list[Component]:
        """Every component in the tree, root first."""
        return self._root.collect_components()