from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from tracker.schemas.category import Category, CategoryCreate, CategoryUpdate
from tracker.storage.base import CategoryDeleteResult, TaskStorage
from tracker.storage.factory import get_storage

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[Category])
def list_categories(storage: TaskStorage = Depends(get_storage)):
    return storage.list_categories()


@router.get("/{slug}", response_model=Category)
def get_category(slug: str, storage: TaskStorage = Depends(get_storage)):
    category = storage.get_category(slug)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(data: CategoryCreate, storage: TaskStorage = Depends(get_storage)):
    return storage.create_category(data)


@router.patch("/{slug}", response_model=Category)
def update_category(slug: str, changes: CategoryUpdate, storage: TaskStorage = Depends(get_storage)):
    category = storage.update_category(slug, changes)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.delete("/{slug}")
def delete_category(slug: str, storage: TaskStorage = Depends(get_storage)):
    result = storage.delete_category(slug)

    if result is CategoryDeleteResult.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    if result is CategoryDeleteResult.IN_USE:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Category is still used by at least one task",
        )
    return {"message": "Category deleted successfully"}
