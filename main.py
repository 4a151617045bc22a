#!/usr/bin/env python3
"""
Interaction Type Framework - Main Demo

This script demonstrates the Interaction Type approach to Relationships
Management with the purchase quotations scenario:

1. STAMEC asks OMCR for a cost estimation
2. DAYTON joins the relationship as a new receiver
3. The interaction type gets a new default message
4. The suppliers answer back by interchanging roles

Output format is configured through the environment
(NOTIFICATION_FORMAT=text|html, NOTIFICATION_LOG=true, LOG_LEVEL=DEBUG).
"""

from interaction_type.config import configure_logging, get_channel, get_renderer, get_settings
from interaction_type.simulation import run_purchase_quotation_demo


def run_purchase_quotation_scenario(settings=None):
    """Run the four purchase quotation steps, printing each structure first."""
    settings = settings or get_settings()
    renderer = get_renderer(settings.notification)
    channel = get_channel(settings.notification)

    def show_structure(step, cast):
        print("-" * 60)
        print(step.title)
        print("-" * 60)
        print(renderer.render_structure(cast.interaction))
        print()
        print("Interaction results:")

    runs = run_purchase_quotation_demo(channel=channel, before_activation=show_structure)
    print("-" * 60)
    print()
    return runs


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)

    print()
    print("+" + "=" * 58 + "+")
    print("|      INTERACTION TYPE APPROACH TO RELATIONSHIPS          |")
    print("|      MANAGEMENT - MICRO FRAMEWORK DEMONSTRATION          |")
    print("+" + "=" * 58 + "+")
    print()

    runs = run_purchase_quotation_scenario(settings)

    print("=" * 60)
    print("DEMONSTRATION COMPLETE")
    print("=" * 60)
    print()
    for i, run in enumerate(runs, 1):
        print(f"  [{i}] {len(run.notifications)} notification(s): {run.title}")
    print()


if __name__ == "__main__":
    main()
