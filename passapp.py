# Password Strength Advisor
# Purpose: score passwords on length, similarity to common passwords and character diversity,
# and suggest improvements. Nothing entered here is stored; only scores are logged.

from cli import test_password_flow, review_activity_flow
from password_checker import get_weak_passwords


# main app menu and selection options
def main_menu():
    entries = len(get_weak_passwords())
    if entries:
        print(f"Loaded {entries} common passwords.")
    else:
        print("Common password list unavailable - similarity scoring uses length only.")

    while True:
        print("\n=== Password Strength Advisor ===")
        print("1. Test a password")
        print("2. Review recent evaluations")
        print("3. Exit")

        choice = input("Choose an option (1-3): ").strip()
        if choice == '1':
            test_password_flow()  # score a password and show suggestions
        elif choice == '2':
            review_activity_flow()  # scores recorded in the SIEM log
        elif choice == '3':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 3.")


if __name__ == "__main__":
    main_menu()
