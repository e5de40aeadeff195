"""Terminal walkthrough of the Fact Check List Pattern page."""

import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def print_facts(content):
    """Print the example verdict cards."""
    from factlist.components import render_facts

    print(f"\n{content.facts_heading}")
    print("-" * 60)
    for item in render_facts(content.facts):
        line = f"[{item.presentation.label_text}] {item.fact.label}"
        if item.correction_text:
            line += f"  {item.correction_text}"
        print(line)


def run_quiz(engine):
    """Interactive quiz loop: pick a letter, check, reset or quit."""
    from factlist.components import UnknownOptionError

    config = engine.config
    print(f"\n{config.title}")
    print(config.prompt)

    while True:
        print()
        for option in config.options:
            marker = "(x)" if engine.selected_id == option.id else "( )"
            print(f"  {marker} {option.id}. {option.text}")

        actions = "option letter, [c]heck, [r]eset, [q]uit"
        if not engine.can_evaluate:
            actions = "option letter, [r]eset, [q]uit"
        choice = input(f"\n{actions}: ").strip()

        if choice.lower() == "q":
            return
        if choice.lower() == "r":
            engine.reset()
            continue
        if choice.lower() == "c":
            if not engine.evaluate():
                print("Select an option first.")
                continue
            feedback = engine.feedback()
            print(f"\n{feedback.message}")
            print("\nExplanations:")
            for explanation in feedback.explanations:
                print(
                    f"  {explanation.option_id}: {explanation.status_label}: "
                    f"{explanation.justification}"
                )
            continue

        try:
            engine.select(choice.upper())
        except UnknownOptionError as e:
            print(e)


def main():
    """Walk through the page in the terminal."""
    from factlist.config import settings
    from factlist.components import QuizEngine
    from factlist.models import load_content, MalformedContentError
    from factlist.services import ActionService, BrowserLinkOpener, LocalFileDownloader

    try:
        content = load_content(settings.CONTENT_FILE)
    except MalformedContentError as e:
        print(f"Error: {e}")
        return

    print("=" * 60)
    print(content.title)
    print("=" * 60)
    print(f"\n{content.intro}")
    print(f"\nHow it works: {' → '.join(content.flow_steps)}")
    print(f"Check each: {', '.join(c.name for c in content.checklist_categories)}")

    print_facts(content)
    run_quiz(QuizEngine(content.quiz))

    if content.case_study:
        case = content.case_study
        print(f"\n{case.title}")
        print(f'Claim: "{case.claim}"')
        for correction in case.corrections:
            print(f"  - {correction} → Corrected")

    if content.cta:
        print(f"\n{content.cta.heading}")
        print(content.cta.tagline)

        actions = ActionService(
            link_opener=BrowserLinkOpener(),
            file_downloader=LocalFileDownloader(destination_dir=os.getcwd()),
        )
        if input(f"\n{content.cta.start_label}? [y/N]: ").strip().lower() == "y":
            actions.start_fact_checking()
        if input(f"{content.cta.download_label}? [y/N]: ").strip().lower() == "y":
            actions.download_guide()

    print(f"\n{content.footer}")


if __name__ == "__main__":
    main()
