from __future__ import annotations

SYSTEM_PROMPT = "Be precise and concise."

# (label, description) in the order the answer should be laid out.
_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("Name", "The official name of the company.", "Name"),
    ("Blurb", "A short description of what the company does.", "Blurb"),
    (
        "Overview of company",
        "A brief overview of the company's mission and operations.",
        "Overview",
    ),
    ("Date founded", "The date when the company was founded.", "Date founded"),
    ("Founders & title", "The names and titles of the founders.", "Founders & title"),
    ("Stage", "The current stage of the company (e.g., startup, growth, mature).", "Stage"),
    ("Funding amount", "The total amount of funding the company has received.", "Funding amount"),
    (
        "Number of employees",
        "The total number of employees working at the company.",
        "Number of employees",
    ),
    (
        "Similar companies/competitors",
        "A list of similar companies or competitors.",
        "Similar companies/competitors",
    ),
)

COMPANY_FIELDS: tuple[str, ...] = tuple(label for label, _, _ in _FIELDS)


def render_company_prompt(subject: str) -> str:
    """
    Render the company research prompt for `subject`.

    The subject is inserted once, quoted, in the opening sentence. It is not
    validated or escaped: an empty subject yields `""` in that slot.
    """

    details = "\n".join(f"- **{label}**: {description}" for label, description, _ in _FIELDS)
    layout = "\n\n".join(f"**{label}**:\n[{placeholder}]" for label, _, placeholder in _FIELDS)
    return (
        f'Please provide the following details about the company "{subject}":\n\n'
        f"{details}\n\n"
        "Please make the response concise and structured as follows:\n\n"
        f"{layout}"
    )
