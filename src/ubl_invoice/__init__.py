"""Génération et transmission de factures UBL 2.1 / PEPPOL BIS Billing 3.0.

FR: Transforme une facture JSON en document UBL 2.1 conforme EN16931
    et PEPPOL BIS Billing 3.0, puis le transmet au service de stockage.
EN: Turns a JSON invoice into a UBL 2.1 document conforming to EN16931
    and PEPPOL BIS Billing 3.0, then pushes it to the storage service.
"""

__version__ = "0.1.0"
