"""Walk the leaves a partial proof would touch for a nested SSZ value."""
from merkle_partial import UINT64, UINT256, ContainerOverlay, ListOverlay, parse_type
from merkle_partial.overlay.field import BasicLeaf, Composite, PaddingLeaf


def main():
    validators = parse_type("List[Vector[uint256, 2], 4]")
    state = ContainerOverlay(
        "State",
        [("slot", UINT64), ("balances", ListOverlay(UINT64, 16)), ("validators", validators), ("root", UINT256)],
    )

    print(f"{state.type_name}: height={state.height()}")
    for index in range(state.first_leaf(), state.last_leaf() + 1):
        node = state.get_node(index)
        if isinstance(node, Composite):
            print(f"  {index:>4}  {node.ident} (composite, height {node.height})")
        elif isinstance(node, BasicLeaf):
            names = ", ".join(f"{b.ident}@{b.offset}" for b in node.values)
            print(f"  {index:>4}  {names}")
        elif isinstance(node, PaddingLeaf):
            print(f"  {index:>4}  <padding>")

    # Descend into the first balance chunk: four packed uint64 values.
    balances = state.field_index("balances")
    print(balances, state.get_node(balances))


if __name__ == "__main__":
    main()
