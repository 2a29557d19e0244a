"""Lookup tables for filler test cases.

Each test-case type has ten (name, description) pairs and a list of design
element names. The synthesizer cycles through them by index.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from designcheck.models.entities import TestCaseType

TEST_CASE_TEMPLATES: Dict[TestCaseType, List[Tuple[str, str]]] = {
    TestCaseType.UI: [
        ("Verify Header Layout", "Check that the header matches the layout described in the requirements"),
        ("Verify Navigation Menu Items", "Check that every navigation entry listed in the requirements is present"),
        ("Verify Button Styles", "Check that primary and secondary buttons follow the specified styles"),
        ("Verify Form Field Labels", "Check that all form fields carry the labels given in the requirements"),
        ("Verify Product Card Content", "Check that product cards show image, title, price and rating"),
        ("Verify Footer Links", "Check that the footer contains the required legal and support links"),
        ("Verify Modal Dialog Layout", "Check that modal dialogs show title, body and action buttons"),
        ("Verify Table Column Order", "Check that data tables list columns in the specified order"),
        ("Verify Empty State Message", "Check that empty lists display the specified empty state message"),
        ("Verify Icon Usage", "Check that icons match the icon set referenced in the requirements"),
    ],
    TestCaseType.FUNCTIONAL: [
        ("Verify Email Validation", "Check that invalid email addresses are rejected with an error message"),
        ("Verify Checkout Steps", "Check that checkout follows the specified sequence of steps"),
        ("Verify Search Results", "Check that search returns items matching the entered keywords"),
        ("Verify Filter Behaviour", "Check that applying filters narrows the product list accordingly"),
        ("Verify Password Reset Flow", "Check that a password reset link is sent and accepted once"),
        ("Verify Cart Quantity Update", "Check that changing the quantity recalculates the cart total"),
        ("Verify Payment Method Selection", "Check that every supported payment method can be selected"),
        ("Verify Profile Update", "Check that profile changes are saved and shown after reload"),
        ("Verify Order Confirmation", "Check that a confirmation with order number appears after purchase"),
        ("Verify Session Timeout", "Check that inactive sessions expire after the specified period"),
    ],
    TestCaseType.UX: [
        ("Verify Onboarding Flow", "Check that first-time users are guided through the onboarding steps"),
        ("Verify Error Recovery", "Check that users can correct errors without losing entered data"),
        ("Verify Loading Feedback", "Check that long operations show a progress indicator"),
        ("Verify Confirmation Prompts", "Check that destructive actions ask for confirmation"),
        ("Verify Breadcrumb Trail", "Check that breadcrumbs reflect the current navigation depth"),
        ("Verify Success Feedback", "Check that completed actions show a success notification"),
        ("Verify Form Autofocus", "Check that the first field of each form receives focus"),
        ("Verify Back Navigation", "Check that returning to a previous step keeps prior choices"),
        ("Verify Tooltip Guidance", "Check that complex fields provide explanatory tooltips"),
        ("Verify Mobile Gestures", "Check that swipe gestures work on touch devices as specified"),
    ],
    TestCaseType.ACCESSIBILITY: [
        ("Verify Color Contrast", "Check that text contrast meets the required ratio"),
        ("Verify Keyboard Navigation", "Check that all interactive elements are reachable by keyboard"),
        ("Verify Screen Reader Labels", "Check that controls expose accessible names to screen readers"),
        ("Verify Focus Indicators", "Check that focused elements show a visible focus outline"),
        ("Verify Image Alt Text", "Check that informative images carry alternative text"),
        ("Verify Form Error Announcements", "Check that validation errors are announced to assistive technology"),
        ("Verify Heading Structure", "Check that headings follow a logical hierarchy"),
        ("Verify Text Resizing", "Check that content remains usable at 200 percent zoom"),
        ("Verify Skip Links", "Check that a skip-to-content link is available on every page"),
        ("Verify Motion Preferences", "Check that animations respect reduced motion settings"),
    ],
    TestCaseType.VISUAL: [
        ("Verify Brand Colors", "Check that the palette matches the brand colors in the requirements"),
        ("Verify Typography Scale", "Check that headings and body text use the specified type scale"),
        ("Verify Spacing Grid", "Check that components align to the specified spacing grid"),
        ("Verify Logo Placement", "Check that the logo appears in the specified position and size"),
        ("Verify Image Aspect Ratios", "Check that product images keep the specified aspect ratio"),
        ("Verify Dark Mode Palette", "Check that dark mode uses the specified color tokens"),
        ("Verify Card Shadows", "Check that cards use the specified elevation and shadows"),
        ("Verify Border Radius", "Check that components use the specified corner radius"),
        ("Verify Responsive Breakpoints", "Check that layouts switch at the specified breakpoints"),
        ("Verify Chart Styling", "Check that charts use the specified colors and legends"),
    ],
}

DESIGN_ELEMENTS: Dict[TestCaseType, List[str]] = {
    TestCaseType.UI: ["Header", "Navigation Menu", "Primary Button", "Login Form", "Product Card"],
    TestCaseType.FUNCTIONAL: ["Login Form", "Checkout Flow", "Search Bar", "Product Filters", "Payment Form"],
    TestCaseType.UX: ["Onboarding Wizard", "Error Banner", "Progress Indicator", "Confirmation Dialog"],
    TestCaseType.ACCESSIBILITY: ["Text Styles", "Focus Ring", "Form Controls", "Image Gallery"],
    TestCaseType.VISUAL: ["Color Palette", "Typography", "Layout Grid", "Brand Logo", "Cards"],
}

__all__ = ["TEST_CASE_TEMPLATES", "DESIGN_ELEMENTS"]
