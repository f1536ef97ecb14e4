"""Sum of three numbers closest to a target."""


def three_sum_closest(nums: list[int], target: int) -> int:
    """Search sorted triples for the sum nearest ``target``.

    The running best starts at 0, so a sum is only taken when it is
    closer to the target than 0 is.
    """
    values = sorted(nums)
    closest = 0
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, len(values) - 1
        while j < k:
            total = first + values[k] + values[j]
            if target == total:
                return total
            if abs(target - total) < abs(target - closest):
                closest = total
                j += 1
                while values[j] == values[j - 1] and j < k:
                    j += 1
            elif target - total < 0:
                j += 1
            else:
                k -= 1
    return closest