"""Service for handling email templates."""

import re

from typing import Dict, Any, Optional

from pathlib import Path


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def escape_html(text: str) -> str:
    """Escape the characters that would let user text break out of HTML markup."""
    return "".join(HTML_ENTITIES.get(char, char) for char in text)


class TemplateService:
    """Service for handling email templates."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.templates_dir = templates_dir

    def load_template(self, template_name: str) -> str:
        """Read `templates/<template_name>.html`.

        Raises:
            FileNotFoundError: If no such template exists.
        """
        template_path = self.templates_dir / f"{template_name}.html"

        if not template_path.exists():
            raise FileNotFoundError(f"Template '{template_name}' not found")

        with open(template_path, "r", encoding="utf-8") as file:
            return file.read()

    def render_template(self, template_name: str, data: Dict[str, Any]) -> str:
        """Render email template with data.

        Placeholders are replaced in a single pass, so text inside a value is never
        treated as a placeholder itself. Unknown placeholders render empty.

        Args:
            template_name (str): The name of the template to render (without extension).
            data (Dict[str, Any]): The data to use for rendering the template.

        Returns:
            str: The rendered email template.
        """
        template = self.load_template(template_name)

        return PLACEHOLDER.sub(lambda match: str(data.get(match.group(1), "")), template)

    def render_contact_email(
        self, name: str, email: str, message: str, subject: Optional[str] = None
    ) -> str:
        """Render the HTML notification for a contact form submission.

        Every user supplied value is HTML escaped before it is placed in the template.

        Args:
            name (str): Name of the person who submitted the form.
            email (str): Their email address.
            message (str): The message they sent.
            subject (Optional[str], optional): Subject they entered. Defaults to None.

        Returns:
            str: The rendered HTML document.
        """
        subject_field = ""
        if subject:
            subject_field = self.render_template(
                "contact_email_subject", {"SUBJECT": escape_html(subject)}
            )

        return self.render_template(
            "contact_email",
            {
                "NAME": escape_html(name),
                "EMAIL": escape_html(email),
                "SUBJECT_FIELD": subject_field,
                "MESSAGE": escape_html(message),
            },
        ).strip()

    def render_contact_text(
        self, name: str, email: str, message: str, subject: Optional[str] = None
    ) -> str:
        """Render the plain text counterpart of `render_contact_email`."""
        subject_line = f"Subject: {subject}" if subject else ""

        return f"""
New contact form submission:

Name: {name}
Email: {email}
{subject_line}

Message:
{message}

---
This email was sent from the contact form.
""".strip()
