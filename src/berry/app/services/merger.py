from berry.spec import (
    ClassExtension,
    ConflictError,
    ExtensionDocument,
    MergedClass,
    NamespaceNode,
)


class NamespaceTreeMerger:
    """
    Folds one package's declarations into the shared namespace tree.

    The tree is mutated in place. A duplicate method name raises
    ConflictError and stops the document at that point; whatever was
    appended before the conflict, from this package or earlier ones,
    stays in the tree.
    """

    def merge(
        self, tree: NamespaceNode, package_name: str, document: ExtensionDocument
    ) -> NamespaceNode:
        for extension in document.extensions:
            self._merge_extension(tree, package_name, extension)
        return tree

    def _merge_extension(
        self, tree: NamespaceNode, package_name: str, extension: ClassExtension
    ) -> None:
        node = tree.descend(extension.segments)

        for class_name in extension.classes:
            merged = node.classes.get(class_name)
            if merged is None:
                merged = MergedClass(segments=extension.segments, name=class_name)
                node.classes[class_name] = merged

            if package_name not in merged.contributors:
                merged.contributors.append(package_name)

            for use in extension.uses:
                if use not in merged.uses:
                    merged.uses.append(use)

            for method in extension.methods:
                if merged.has_method(method.name):
                    raise ConflictError(method.name, merged.fqn, package_name)
                merged.methods.append(method)
