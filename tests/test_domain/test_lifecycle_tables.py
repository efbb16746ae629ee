import pytest

from tradeconnect.domain.enums import (
    BuyerStatus,
    InquiryApprovalStatus,
    ProductStatus,
    SupplierStatus,
)
from tradeconnect.domain.exceptions import InvalidTransitionError
from tradeconnect.domain.lifecycle import (
    BUYER_TRANSITIONS,
    INQUIRY_APPROVAL_TRANSITIONS,
    PRODUCT_TRANSITIONS,
    SUPPLIER_TRANSITIONS,
    allowed_actions,
    ensure_transition,
)


class TestEnsureTransition:

    def test_returns_target_status(self):
        """Test a legal action yields its target status."""
        target = ensure_transition(
            SUPPLIER_TRANSITIONS, "Supplier", "approve", SupplierStatus.PENDING_APPROVAL
        )
        assert target == SupplierStatus.ACTIVE

    def test_illegal_source_raises(self):
        """Test approving an active supplier is refused."""
        with pytest.raises(InvalidTransitionError) as exc_info:
            ensure_transition(SUPPLIER_TRANSITIONS, "Supplier", "approve", SupplierStatus.ACTIVE)

        error = exc_info.value
        assert error.action == "approve"
        assert error.current_status == "active"
        assert error.error_code == "INVALID_TRANSITION"
        assert error.message == "Cannot approve supplier with status 'active'"

    def test_unknown_action_raises(self):
        """Test an action missing from the table is refused."""
        with pytest.raises(InvalidTransitionError):
            ensure_transition(PRODUCT_TRANSITIONS, "Product", "launch", ProductStatus.DRAFT)

    def test_enum_values_compare_as_strings(self):
        """Test raw status strings from storage resolve like the enum members."""
        assert ensure_transition(PRODUCT_TRANSITIONS, "Product", "publish", "draft") == ProductStatus.PENDING


class TestTransitionTables:

    def test_deleted_supplier_is_terminal(self):
        """Test no action leads out of a deleted supplier."""
        assert allowed_actions(SUPPLIER_TRANSITIONS, SupplierStatus.DELETED) == []

    def test_supplier_restore_only_from_rejected(self):
        """Test restore is offered for rejected suppliers only."""
        for status in SupplierStatus:
            offered = "restore" in allowed_actions(SUPPLIER_TRANSITIONS, status)
            assert offered == (status == SupplierStatus.REJECTED)

    def test_supplier_activate_is_idempotent(self):
        """Test activate is allowed from active and stays active."""
        assert SUPPLIER_TRANSITIONS["activate"][SupplierStatus.ACTIVE] == SupplierStatus.ACTIVE

    def test_every_product_status_can_be_soft_deleted_except_deleted(self):
        """Test soft delete covers all live product statuses."""
        sources = set(PRODUCT_TRANSITIONS["soft_delete"])
        assert sources == set(ProductStatus) - {ProductStatus.DELETED}

    def test_edit_sends_reviewed_products_back_to_review(self):
        """Test editing approved or rejected products returns them to pending."""
        edit = PRODUCT_TRANSITIONS["edit"]
        assert edit[ProductStatus.APPROVED] == ProductStatus.PENDING
        assert edit[ProductStatus.REJECTED] == ProductStatus.PENDING
        assert edit[ProductStatus.DRAFT] == ProductStatus.DRAFT
        assert ProductStatus.DELETED not in edit

    def test_recovered_products_are_reviewed_again(self):
        """Test recovering a deleted product puts it back in the queue."""
        assert PRODUCT_TRANSITIONS["recover"] == {ProductStatus.DELETED: ProductStatus.PENDING}

    def test_inquiry_decision_can_flip(self):
        """Test admins may overturn an inquiry decision."""
        assert INQUIRY_APPROVAL_TRANSITIONS["approve"][InquiryApprovalStatus.REJECTED] == InquiryApprovalStatus.APPROVED
        assert INQUIRY_APPROVAL_TRANSITIONS["reject"][InquiryApprovalStatus.APPROVED] == InquiryApprovalStatus.REJECTED

    def test_buyer_actions(self):
        """Test buyer suspension is only possible while active."""
        assert allowed_actions(BUYER_TRANSITIONS, BuyerStatus.ACTIVE) == ["suspend", "activate"]
        assert allowed_actions(BUYER_TRANSITIONS, BuyerStatus.SUSPENDED) == ["activate"]
