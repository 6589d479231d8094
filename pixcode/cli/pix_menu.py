from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import questionary
from rich.console import Console
from rich.table import Table

from pixcode.constants import DEFAULT_TRANSACTION_ID, ID_ADDITIONAL_DATA, ID_MERCHANT_ACCOUNT
from pixcode.crc import verify_crc
from pixcode.errors import ValidationError
from pixcode.keys import validate_key
from pixcode.models import format_brl, parse_brl
from pixcode.models.payload import PixPayload
from pixcode.models.pix import MerchantProfile, PaymentRequest, PixKey, PixKeyType
from pixcode.payload import build_with_report
from pixcode.phone import format_phone_br, normalize_phone_detailed
from pixcode.render import render_qrcode_png
from pixcode.settings import settings
from pixcode.tlv import parse_fields

console = Console()

AUTO_DETECT = "Detectar automaticamente"

KEY_TYPE_CHOICES: dict[str, PixKeyType | None] = {
    AUTO_DETECT: None,
    "Telefone": PixKeyType.PHONE,
    "CPF": PixKeyType.CPF,
    "CNPJ": PixKeyType.CNPJ,
    "E-mail": PixKeyType.EMAIL,
    "Chave aleatória": PixKeyType.RANDOM,
}

STATUS_LABELS = {
    "normalized": "Normalizado",
    "ambiguous": "Normalizado por estimativa",
    "not_a_phone": "Não é telefone",
}

FIELD_LABELS = {
    "00": "Payload Format Indicator",
    "01": "Point of Initiation Method",
    "26": "Merchant Account Information",
    "52": "Merchant Category Code",
    "53": "Transaction Currency",
    "54": "Transaction Amount",
    "58": "Country Code",
    "59": "Merchant Name",
    "60": "Merchant City",
    "62": "Additional Data Field",
    "63": "CRC16",
}


def _default_type_label() -> str:
    declared = PixKeyType.parse(settings.pix_key_type)
    for label, key_type in KEY_TYPE_CHOICES.items():
        if key_type == declared:
            return label
    return AUTO_DETECT


def _ask_amount() -> Decimal | None:
    while True:
        amount_str = questionary.text("Valor (ex: 12.50):").ask()
        if amount_str is None:
            return None
        parsed = parse_brl(amount_str)
        if parsed is not None and parsed >= 0:
            return parsed
        console.print("[red]Valor inválido. Tente novamente.[/red]")


def _print_payload(result: PixPayload) -> None:
    table = Table(title="Payload PIX")
    table.add_column("Campo")
    table.add_column("Valor")

    table.add_row("Chave", result.key.protocol_value)
    table.add_row("Situação da chave", STATUS_LABELS.get(result.key.status.value, result.key.status.value))
    table.add_row("Estabelecimento", result.merchant.name)
    table.add_row("Cidade", result.merchant.city)
    table.add_row("Valor", format_brl(result.amount))

    console.print(table)
    console.print()
    console.print(result.payload, soft_wrap=True, markup=False, highlight=False)


def generate_payload_menu() -> None:
    console.print()
    console.print("[bold]Novo Payload PIX[/bold]", style="cyan")

    pix_key = questionary.text("Chave PIX:", default=settings.pix_key).ask()
    if not pix_key:
        console.print("[yellow]Operação cancelada.[/yellow]")
        return

    type_label = questionary.select(
        "Tipo da chave:",
        choices=list(KEY_TYPE_CHOICES),
        default=_default_type_label(),
    ).ask()
    if type_label is None:
        console.print("[yellow]Operação cancelada.[/yellow]")
        return
    key_type = KEY_TYPE_CHOICES[type_label]

    name = questionary.text("Nome do estabelecimento:", default=settings.merchant_name).ask() or ""
    city = questionary.text("Cidade (opcional):", default=settings.merchant_city).ask() or ""

    amount = _ask_amount()
    if amount is None:
        console.print("[yellow]Operação cancelada.[/yellow]")
        return

    txid = questionary.text("Identificador da transação (opcional):").ask() or DEFAULT_TRANSACTION_ID

    if key_type is not None and not validate_key(pix_key, key_type):
        console.print(f"[yellow]Atenção: a chave informada não parece ser do tipo {type_label}.[/yellow]")

    request = PaymentRequest(
        key=PixKey(declared_type=key_type, raw_value=pix_key),
        merchant=MerchantProfile(name=name, city=city),
        amount=amount,
        transaction_id=txid,
    )
    try:
        result = build_with_report(request)
    except ValidationError as e:
        console.print(f"[red]Erro ao gerar payload: {e.message}[/red]")
        return

    _print_payload(result)

    if result.key.type_conflict:
        console.print(
            f"[yellow]A chave informada como {type_label} parece um telefone e foi "
            f"codificada como {result.key.value}. Confira o tipo da chave.[/yellow]"
        )

    if result.ambiguous:
        console.print(
            "[yellow]A chave de telefone foi completada por estimativa "
            "(DDD ou nono dígito). Confirme com o titular antes de usar.[/yellow]"
        )

    save = questionary.confirm("Salvar QR code em PNG?", default=False).ask()
    if not save:
        return

    path = questionary.text("Arquivo de saída:", default="pix.png").ask()
    if not path:
        return

    png = render_qrcode_png(result.payload, box_size=settings.qr_box_size, border=settings.qr_border)
    Path(path).write_bytes(png)
    console.print(f"[green]QR code salvo em {path}[/green]")


def normalize_phone_menu() -> None:
    console.print()
    phone = questionary.text("Telefone:").ask()
    if not phone:
        return

    result = normalize_phone_detailed(phone)
    if not result.value:
        console.print("[red]Nenhum dígito encontrado.[/red]")
        return

    table = Table()
    table.add_column("E.164")
    table.add_column("Situação")
    table.add_column("Exibição")
    table.add_row(
        "+" + result.value,
        STATUS_LABELS.get(result.status.value, result.status.value),
        format_phone_br(result.value[2:]),
    )
    console.print(table)


def check_payload_menu() -> None:
    console.print()
    payload = questionary.text("Cole o payload PIX:").ask()
    if not payload:
        return
    payload = payload.strip()

    try:
        fields = parse_fields(payload)
    except ValidationError as e:
        console.print(f"[red]Payload inválido: {e.message}[/red]")
        return

    table = Table(title="Campos")
    table.add_column("ID", style="dim")
    table.add_column("Campo")
    table.add_column("Valor")

    for f in fields:
        table.add_row(f.id, FIELD_LABELS.get(f.id, "-"), f.value)
        if f.id in (ID_MERCHANT_ACCOUNT, ID_ADDITIONAL_DATA):
            try:
                for sub in parse_fields(f.value):
                    table.add_row(f"  {f.id}.{sub.id}", "", sub.value)
            except ValidationError:
                table.add_row(f"  {f.id}.?", "", "[red]sub-campos inválidos[/red]")

    console.print(table)

    if verify_crc(payload):
        console.print("[green]CRC16 válido.[/green]")
    else:
        console.print("[red]CRC16 inválido.[/red]")
