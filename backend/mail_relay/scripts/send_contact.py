import argparse
import asyncio
import sys

from mail_relay.client import ContactForm, submit_contact_form
from mail_relay.core.settings import settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Send one contact-form submission to the relay.")
    parser.add_argument("--name", default="")
    parser.add_argument("--email", default="")
    parser.add_argument("--message", default="")
    parser.add_argument("--url", default=settings.relay_url)
    return parser.parse_args(argv)


async def run(argv=None) -> int:
    args = parse_args(argv)
    form = ContactForm(name=args.name, email=args.email, message=args.message)
    note = await submit_contact_form(form, url=args.url)
    print(note.text)
    return 0 if note.ok else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(run()))
