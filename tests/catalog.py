"""Catalog components shared by the test-suite."""

from jrx import component, jsx

Stack = component("Stack")
Card = component("Card")
Text = component("Text")
Button = component("Button")
Badge = component("Badge")
List = component("List")
ListItem = component("ListItem")
Select = component("Select")
Input = component("Input")
Divider = component("Divider")


def Labeled(props):
    """Composite component: a Stack with a Text label above its children."""
    return jsx(
        "Stack",
        {
            "key": props.get("key"),
            "children": [jsx("Text", {"content": props["label"]}), props.get("children")],
        },
    )
