"""Générateur UBL 2.1 (PEPPOL BIS Billing 3.0).

FR: Produit une facture commerciale (type 380) conforme au standard OASIS
    UBL 2.1, au modèle sémantique EN16931 et au profil PEPPOL BIS
    Billing 3.0. L'ordre des éléments est imposé par le schéma : le
    modifier rend le document invalide.
EN: Produces a commercial invoice (type 380) conforming to OASIS UBL 2.1,
    EN16931 and PEPPOL BIS Billing 3.0. Element order is mandated by the
    schema; changing it makes the document invalid.
"""

from datetime import date

from ubl_invoice.generators.base import GenerationResult
from ubl_invoice.models.enums import (
    InvoiceTypeCode,
    TaxSchemeCode,
    UnitOfMeasure,
    VATCategory,
)
from ubl_invoice.models.invoice import Invoice, InvoiceItem
from ubl_invoice.models.party import Address, Party
from ubl_invoice.xml.nodes import Element, element
from ubl_invoice.xml.writer import XMLWriter

# --- Namespaces UBL 2.1 ---
INV_NS = "urn:oasis:names:specification:ubl:schema:xsd:Invoice-2"
CAC = "urn:oasis:names:specification:ubl:schema:xsd:CommonAggregateComponents-2"
CBC = "urn:oasis:names:specification:ubl:schema:xsd:CommonBasicComponents-2"

NSMAP: dict[str | None, str] = {None: INV_NS, "cac": CAC, "cbc": CBC}

# --- Identifiants du profil PEPPOL BIS Billing 3.0 ---
UBL_VERSION_ID = "2.1"
CUSTOMIZATION_ID = (
    "urn:cen.eu:en16931:2017#compliant#"
    "urn:fdc:peppol.eu:2017:poacc:billing:3.0"
)
PROFILE_ID = "urn:fdc:peppol.eu:2017:poacc:billing:01:1.0"


def _cac(tag: str) -> str:
    """Construit un nom qualifié dans le namespace CAC."""
    return f"{{{CAC}}}{tag}"


def _cbc(tag: str) -> str:
    """Construit un nom qualifié dans le namespace CBC."""
    return f"{{{CBC}}}{tag}"


def _fmt_number(value: int) -> str:
    """Forme décimale canonique (ni symbole, ni séparateur de milliers)."""
    return str(value)


def _fmt_date(d: date) -> str:
    """Formate une date au format ISO 8601 (YYYY-MM-DD)."""
    return d.isoformat()


def _amount(tag: str, value: int, currency: str) -> Element:
    """Montant CBC portant l'attribut currencyID."""
    return element(_cbc(tag), _fmt_number(value), currencyID=currency)


def _tax_scheme() -> Element:
    return element(_cac("TaxScheme"), element(_cbc("ID"), str(TaxSchemeCode.VAT)))


class UBLGenerator:
    """Générateur de factures au format UBL 2.1.

    FR: Construit l'arbre du document (``build``) puis le confie au writer
        XML (``generate_xml``). Aucune entrée/sortie : transformation pure.
    EN: Builds the document tree (``build``) then hands it to the XML
        writer (``generate_xml``). No I/O: pure transformation.
    """

    def __init__(self, writer: XMLWriter | None = None) -> None:
        self.writer = writer or XMLWriter()

    def generate(self, invoice: Invoice) -> GenerationResult:
        """Génère la facture et propose un nom de fichier."""
        file_name = invoice.output_file or f"{invoice.invoice_number}.xml"
        return GenerationResult(xml=self.generate_xml(invoice), file_name=file_name)

    def generate_xml(self, invoice: Invoice) -> str:
        """Génère le XML UBL de la facture."""
        return self.writer.to_string(self.build(invoice))

    def build(self, invoice: Invoice) -> Element:
        """Construit l'arbre UBL de la facture."""
        return element(
            f"{{{INV_NS}}}Invoice",
            self._build_header(invoice),
            element(
                _cac("AccountingSupplierParty"), self._build_party(invoice.supplier)
            ),
            element(
                _cac("AccountingCustomerParty"), self._build_party(invoice.customer)
            ),
            self._build_payment_terms(invoice),
            self._build_tax_total(invoice),
            self._build_legal_monetary_total(invoice),
            (
                self._build_invoice_line(item, idx, invoice)
                for idx, item in enumerate(invoice.items, start=1)
            ),
            nsmap=NSMAP,
        )

    # --- En-tête ---

    def _build_header(self, invoice: Invoice) -> list[Element | None]:
        """Éléments d'en-tête, de UBLVersionID à BuyerReference."""
        return [
            element(_cbc("UBLVersionID"), UBL_VERSION_ID),
            element(_cbc("CustomizationID"), CUSTOMIZATION_ID),
            element(_cbc("ProfileID"), PROFILE_ID),
            element(_cbc("ID"), invoice.invoice_number),
            element(_cbc("IssueDate"), _fmt_date(invoice.issue_date)),
            element(_cbc("DueDate"), _fmt_date(invoice.due_date)),
            element(_cbc("InvoiceTypeCode"), str(InvoiceTypeCode.INVOICE)),
            element(_cbc("DocumentCurrencyCode"), invoice.currency),
            # AccountingCost (référence comptable acheteur, optionnel)
            element(_cbc("AccountingCost"), invoice.accounting_cost)
            if invoice.accounting_cost
            else None,
            # BuyerReference (optionnel)
            element(_cbc("BuyerReference"), invoice.buyer_reference)
            if invoice.buyer_reference
            else None,
        ]

    # --- Parties ---

    def _build_party(self, party: Party) -> Element:
        """Construit Party : identifiant, nom, adresse, TVA et entité légale."""
        party_id = None
        if party.id:
            party_id = element(
                _cac("PartyIdentification"), element(_cbc("ID"), party.id)
            )

        return element(
            _cac("Party"),
            party_id,
            element(_cac("PartyName"), element(_cbc("Name"), party.name)),
            self._build_postal_address(party.address),
            element(
                _cac("PartyTaxScheme"),
                element(_cbc("CompanyID"), party.tax_id),
                _tax_scheme(),
            ),
            element(
                _cac("PartyLegalEntity"),
                element(_cbc("RegistrationName"), party.name),
                element(_cbc("CompanyID"), party.company_id),
            ),
        )

    def _build_postal_address(self, address: Address) -> Element:
        """Construit PostalAddress."""
        return element(
            _cac("PostalAddress"),
            element(_cbc("StreetName"), address.street),
            element(_cbc("CityName"), address.city),
            element(_cbc("PostalZone"), address.postcode),
            element(
                _cac("Country"),
                element(_cbc("IdentificationCode"), address.country),
            ),
        )

    # --- Paiement ---

    def _build_payment_terms(self, invoice: Invoice) -> Element:
        """Construit PaymentTerms (texte par défaut si absent)."""
        return element(
            _cac("PaymentTerms"),
            element(_cbc("Note"), invoice.payment_terms_note),
        )

    # --- TVA ---

    def _build_tax_category(self, tag: str, invoice: Invoice) -> Element:
        """Catégorie de TVA au taux normal (facture et lignes)."""
        return element(
            _cac(tag),
            element(_cbc("ID"), str(VATCategory.STANDARD)),
            element(_cbc("Percent"), _fmt_number(invoice.tax.percent)),
            _tax_scheme(),
        )

    def _build_tax_total(self, invoice: Invoice) -> Element:
        """Construit TaxTotal avec un unique TaxSubtotal (taux unique)."""
        currency = invoice.currency
        return element(
            _cac("TaxTotal"),
            _amount("TaxAmount", invoice.tax.amount, currency),
            element(
                _cac("TaxSubtotal"),
                _amount("TaxableAmount", invoice.amounts.taxable, currency),
                _amount("TaxAmount", invoice.tax.amount, currency),
                self._build_tax_category("TaxCategory", invoice),
            ),
        )

    # --- Totaux monétaires ---

    def _build_legal_monetary_total(self, invoice: Invoice) -> Element:
        """Construit LegalMonetaryTotal (montants repris sans recalcul)."""
        currency = invoice.currency
        amounts = invoice.amounts
        return element(
            _cac("LegalMonetaryTotal"),
            _amount("LineExtensionAmount", amounts.taxable, currency),
            _amount("TaxExclusiveAmount", amounts.taxable, currency),
            _amount("TaxInclusiveAmount", amounts.total, currency),
            _amount("PayableAmount", amounts.total, currency),
        )

    # --- Lignes de facture ---

    def _build_invoice_line(
        self, item: InvoiceItem, idx: int, invoice: Invoice
    ) -> Element:
        """Construit InvoiceLine ; l'ID est la position de la ligne."""
        currency = invoice.currency
        unit_code = item.unit_code or str(UnitOfMeasure.EACH)

        return element(
            _cac("InvoiceLine"),
            element(_cbc("ID"), str(idx)),
            element(
                _cbc("InvoicedQuantity"),
                _fmt_number(item.quantity),
                unitCode=unit_code,
            ),
            _amount("LineExtensionAmount", item.line_amount, currency),
            element(
                _cac("Item"),
                element(_cbc("Name"), item.name),
                element(_cbc("Description"), item.description)
                if item.description
                else None,
                self._build_tax_category("ClassifiedTaxCategory", invoice),
            ),
            element(
                _cac("Price"),
                _amount("PriceAmount", item.price, currency),
            ),
        )
