import questionary
from rich.console import Console

from pixcode.cli.pix_menu import check_payload_menu, generate_payload_menu, normalize_phone_menu

console = Console()


def main_menu() -> None:
    console.print()
    console.print("[bold]Gerador de PIX Copia e Cola[/bold]", style="cyan")
    console.print()

    while True:
        choice = questionary.select(
            "Menu Principal",
            choices=[
                "Gerar Payload PIX",
                "Normalizar Telefone",
                "Verificar Payload",
                "Sair",
            ],
        ).ask()

        if choice is None or choice == "Sair":
            console.print("[bold]Até logo![/bold]")
            break
        elif choice == "Gerar Payload PIX":
            generate_payload_menu()
        elif choice == "Normalizar Telefone":
            normalize_phone_menu()
        elif choice == "Verificar Payload":
            check_payload_menu()
