from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging

from museum_api.database import get_db
from museum_api.errors import DomainError
from museum_api.schemas.tickets import (
    TicketPurchaseRequestSchema,
    TicketPurchaseResponseSchema
)
from museum_api.services import ticket_purchase as purchase_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/v1/tickets",
    tags=["Ticket Purchase"]
)


@router.post(
    "/purchase",
    response_model=TicketPurchaseResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Purchase general admission (omit eventId) or special event tickets"
)
async def purchase_tickets(
    purchase_data: TicketPurchaseRequestSchema,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    try:
        result = await purchase_service.purchase_tickets(
            db,
            visit_date=purchase_data.visit_date,
            quantity=purchase_data.quantity,
            event_id=purchase_data.event_id,
        )
    except DomainError as e_domain:
        logger.info(f"Ticket purchase rejected {purchase_data.model_dump_json()}: {e_domain}")
        raise
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error purchasing tickets {purchase_data.model_dump_json()}: {str(e_general)}",
            exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while processing the ticket purchase."
        )
    response.headers["Location"] = f"/v1/tickets/purchase/{result.purchase.purchase_id}"
    return TicketPurchaseResponseSchema.from_result(result)


@router.get(
    "/purchase/{purchase_id}",
    response_model=TicketPurchaseResponseSchema,
    summary="Get a ticket purchase confirmation by ID"
)
async def get_ticket_purchase(
    purchase_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    try:
        result = await purchase_service.get_purchase(db, purchase_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Error fetching ticket purchase {purchase_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching the ticket purchase."
        )
    return TicketPurchaseResponseSchema.from_result(result)
